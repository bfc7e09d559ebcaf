#coding:utf-8
"""A setuptools based setup module for aperture package.
See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""

from os import path
# Always prefer setuptools over distutils
from setuptools import setup, find_namespace_packages

HERE = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(HERE, 'README.md'), encoding='utf-8') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='aperture',
    version='0.1.0',
    description='Symbolic ZeroMQ portals for pipeline stages',
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    author='The Aperture Project Contributors',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',

        'Intended Audience :: Developers',

        'License :: OSI Approved :: MIT License',

        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',

        'Operating System :: POSIX :: Linux',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: MacOS',

        'Topic :: System :: Networking',
        'Topic :: Software Development :: Libraries',
        ],
    keywords='ZeroMQ messaging pipeline',
    package_dir={'': 'src'},
    packages=find_namespace_packages('src', include=['aperture*']),
    install_requires=['pyzmq>=25.0', 'protobuf>=5.29', 'firebird-base>=2.0'],
    extras_require={'test': ['pytest>=7.4']},
    python_requires='>=3.11, <4',
)
