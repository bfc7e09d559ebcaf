import pickle

import pytest

from firebird.base.types import Error

from aperture.base import APERTURE_CFG, SECTION_APERTURE, ApertureConfig, directory_scheme
from aperture.base.config import config_files, load_config


@pytest.fixture
def config():
    return ApertureConfig()

@pytest.fixture
def conf_file(tmp_path):
    def write(text, name=APERTURE_CFG):
        path = tmp_path / name
        path.write_text(text)
        return path
    return write


class TestApertureConfig:
    def test_defaults(self, config):
        assert config.name == SECTION_APERTURE
        assert config.io_threads.value == 1
        assert config.auto_shutdown.value is True
        assert config.close_timeout.value is None
        assert config.pickle_protocol.value == pickle.DEFAULT_PROTOCOL
        config.validate()

    def test_load(self, config, conf_file):
        path = conf_file("""[aperture]
io_threads = 4
auto_shutdown = no
close_timeout = -1
pickle_protocol = 2
""")
        load_config(config, [path])
        assert config.io_threads.value == 4
        assert config.auto_shutdown.value is False
        assert config.close_timeout.value == -1
        assert config.pickle_protocol.value == 2

    def test_later_file_wins(self, config, conf_file, tmp_path):
        site = conf_file("[aperture]\nio_threads = 2\nclose_timeout = 100\n", 'site.conf')
        user = conf_file("[aperture]\nclose_timeout = 500\n", 'user.conf')
        load_config(config, [site, user, tmp_path / 'missing.conf'])
        assert config.io_threads.value == 2
        assert config.close_timeout.value == 500

    def test_other_sections_ignored(self, config, conf_file):
        load_config(config, [conf_file("[logging]\nio_threads = 0\n")])
        assert config.io_threads.value == 1

    def test_no_files(self, config, tmp_path):
        load_config(config, [tmp_path / APERTURE_CFG])
        assert config.io_threads.value == 1

    def test_environment_interpolation(self, config, conf_file, monkeypatch):
        monkeypatch.setenv('APERTURE_IO_THREADS', '3')
        load_config(config, [conf_file("[aperture]\nio_threads = ${env:APERTURE_IO_THREADS}\n")])
        assert config.io_threads.value == 3

    @pytest.mark.parametrize("text, message", [
        ("[aperture]\nio_threads = 0\n", "'io_threads' must be greater than zero"),
        (f"[aperture]\npickle_protocol = {pickle.HIGHEST_PROTOCOL + 1}\n",
         "'pickle_protocol' must not be greater than"),
    ])
    def test_invalid(self, config, conf_file, text, message):
        with pytest.raises(Error, match=message):
            load_config(config, [conf_file(text)])

    def test_config_files(self):
        site, user = config_files(directory_scheme)
        assert site == directory_scheme.config / APERTURE_CFG
        assert user == directory_scheme.user_config / APERTURE_CFG
