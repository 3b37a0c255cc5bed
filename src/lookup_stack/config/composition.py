from __future__ import annotations

from pathlib import Path

from lookup_stack.adapters.hierarchy import HierarchicalLookup
from lookup_stack.adapters.path import PathLookup
from lookup_stack.adapters.prefix import PrefixResolvingLookup
from lookup_stack.config.loader import ConfigError, load_yaml_config
from lookup_stack.config.models import LoggingConfig, PathLayer, PrefixLayer, StackConfig, validate_stack_config
from lookup_stack.contract.lookup import Lookup
from lookup_stack.observability.sinks import JsonlLogSink, LogSink, StreamLogSink


def load_stack_config(path: Path) -> StackConfig:
    return validate_stack_config(load_yaml_config(path))


def load_data(config: StackConfig, *, base_dir: Path | None = None) -> dict[str, object]:
    # Lookups only take string keys, so YAML keys such as `80:` or `true:` become "80" / "True".
    # The rebuild also gives each stack its own tree; materialization writes into it.
    if config.data is not None:
        raw: dict[str, object] = config.data
    else:
        assert config.data_file is not None
        raw = load_yaml_config(_resolve(Path(config.data_file), base_dir))
    tree = _with_string_keys(raw, "data")
    assert isinstance(tree, dict)
    return tree


def build_log_sink(config: LoggingConfig, *, base_dir: Path | None = None) -> LogSink | None:
    if config.sink == "stderr":
        return StreamLogSink()
    if config.sink == "jsonl":
        assert config.path is not None
        return JsonlLogSink(_resolve(Path(config.path), base_dir))
    return None


def build_lookup(config: StackConfig, *, base_dir: Path | None = None, log: LogSink | None = None) -> Lookup:
    # Layers wrap bottom-up: the first declared layer sits directly on the data tree.
    lookup: Lookup = HierarchicalLookup(load_data(config, base_dir=base_dir), log=log)
    for layer in config.layers:
        if isinstance(layer, PrefixLayer):
            lookup = PrefixResolvingLookup(lookup, layer.prefix, layer.strict, log=log)
        elif isinstance(layer, PathLayer):
            lookup = PathLookup(lookup, layer.delimiter)
    return lookup


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if path.is_absolute() or base_dir is None:
        return path
    return base_dir / path


def _with_string_keys(value: object, where: str) -> object:
    if isinstance(value, dict):
        result: dict[str, object] = {}
        for key, item in value.items():
            name = str(key)
            if name in result:
                raise ConfigError(f"{where} has keys that collide as '{name}'")
            result[name] = _with_string_keys(item, f"{where}.{name}")
        return result
    if isinstance(value, list):
        return [_with_string_keys(item, f"{where}.{index}") for index, item in enumerate(value)]
    return value
