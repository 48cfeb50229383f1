import pytest

SAMPLE_CONFIG = """\
# Alacritty config
window:
  padding:
    x: 4
    y: 4

schemes:
  gruvbox: &gruvbox
    primary:
      background: '#282828'
      foreground: '#ebdbb2'
  solarized: &solarized
    primary:
      background: '#002b36'
      foreground: '#839496'
  nord: &nord
    primary:
      background: '#2e3440'
      foreground: '#d8dee9'

# colors: *nord
colors: *gruvbox
font:
  size: 11.0
"""


@pytest.fixture
def sample_config() -> str:
    return SAMPLE_CONFIG


@pytest.fixture
def config_file(tmp_path, sample_config):
    path = tmp_path / "alacritty.yml"
    path.write_text(sample_config, encoding="utf-8")
    return path
