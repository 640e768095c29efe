import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "familytree.yml"

DEFAULT_PAIR = ("Bilbo", "Frodo")


class FTConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.loader = data.get("loader", {}) or {}
        self.query = data.get("query", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def data_dir(self) -> str:
        return self.paths.get("data_dir", "data")

    @property
    def encoding(self) -> str:
        return self.loader.get("encoding", "utf-8")

    @property
    def skip_blank_lines(self) -> bool:
        return bool(self.loader.get("skip_blank_lines", False))

    @property
    def default_pair(self) -> tuple:
        pair = self.query.get("default_pair") or DEFAULT_PAIR
        if len(pair) != 2:
            raise ValueError(f"query.default_pair must name two people, got {pair!r}")
        return tuple(pair)


def load_config(path: Path | None = None) -> 'FTConfig':
    if path is not None and not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    path = path or CONFIG_PATH
    if not path.exists():
        # Installed without the project tree; run on built-in defaults.
        return FTConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FTConfig(data)


_config_cache = None


def get_config() -> 'FTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
