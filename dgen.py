'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

schema-driven fake records as lazy lists.

a schema is compiled once into a tree of field functions, so a misspelt
faker method, an unknown provider or a dangling reference is reported by
from_schema() instead of halfway through a stream. every record is drawn
from a _Draw: the faker instance, the numpy generator and the position of
the record in its stream.
'''

import functools
import numpy as np
from faker import Faker
from lazyseq import LazyList, INFINITE
from typing import Any, Callable, Dict, FrozenSet, Iterator, Optional

Field = Callable[['_Draw', Dict[str, Any]], Any]

DEFAULT_COUNT = 5


class _Draw:
    """random state for one pass over a stream"""

    def __init__(self, seed: int):
        self.fake = Faker()
        # per-instance seeding, so two cursors over one stream never share state
        self.fake.seed_instance(seed)
        self.rng = np.random.default_rng(seed)
        self.index = 0


@functools.lru_cache(maxsize=1)
def _reference_faker() -> Faker:
    """only asked which methods exist, never drawn from"""
    return Faker()


def _is_faker_method(name: str) -> bool:
    return hasattr(_reference_faker(), name)


# --- providers ---

def _faker_field(method_name: str, kwargs: Optional[Dict] = None) -> Field:
    if not _is_faker_method(method_name):
        raise ValueError(f"faker has no provider '{method_name}'")
    kwargs = dict(kwargs or {})

    def field(draw: _Draw, context: Dict[str, Any]) -> Any:
        return getattr(draw.fake, method_name)(**kwargs)
    return field


def _ref(config: Dict, scope: FrozenSet[str]) -> Field:
    key = config.get("key")
    if key not in scope:
        raise ValueError(f"reference to '{key}' not found in current context.")
    fmt = config.get("format")

    def field(draw, context):
        value = context[key]
        return value if fmt is None else fmt.format(value)
    return field


def _choice(config: Dict, scope: FrozenSet[str]) -> Field:
    options = list(config.get("from") or [])
    if not options:
        raise ValueError("_qen_provider 'choice' requires a non-empty 'from' list.")

    def field(draw, context):
        # indexing keeps the options' own python types
        return options[int(draw.rng.integers(len(options)))]
    return field


def _literal(config: Dict, scope: FrozenSet[str]) -> Field:
    if "value" not in config:
        raise ValueError("_qen_provider 'literal' requires a 'value' key.")
    value = config["value"]
    return lambda draw, context: value


def _sequence(config: Dict, scope: FrozenSet[str]) -> Field:
    """start, start + step, ... along the stream"""
    start, step = config.get("start", 0), config.get("step", 1)
    return lambda draw, context: start + step * draw.index


_PROVIDERS: Dict[str, Callable[[Dict, FrozenSet[str]], Field]] = {
    "ref": _ref,
    "choice": _choice,
    "literal": _literal,
    "sequence": _sequence,
}


# --- compiler ---

def _compile(schema: Any, scope: FrozenSet[str]) -> Field:
    if isinstance(schema, dict):
        if "_qen_provider" in schema:
            name = schema["_qen_provider"]
            if name not in _PROVIDERS:
                raise ValueError(f"unknown _qen_provider: '{name}'")
            return _PROVIDERS[name](schema, scope)
        return _compile_record(schema, scope)

    if isinstance(schema, list):
        return _compile_repeated(schema, scope)

    if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
        return _faker_field(schema[0], schema[1])

    if isinstance(schema, str) and _is_faker_method(schema):
        return _faker_field(schema)

    # anything else, unknown strings included, is a literal
    return lambda draw, context: schema


def _compile_record(schema: Dict, scope: FrozenSet[str]) -> Field:
    fields = []
    visible = set(scope)
    for key, sub_schema in schema.items():
        # refs can look up into the parent and sideways into earlier siblings
        fields.append((key, _compile(sub_schema, frozenset(visible))))
        visible.add(key)

    def record(draw, context):
        generated = {}
        for key, field in fields:
            generated[key] = field(draw, {**context, **generated})
        return generated
    return record


def _counter(spec: Any) -> Callable[[_Draw], int]:
    if isinstance(spec, int) and not isinstance(spec, bool) and spec >= 0:
        return lambda draw: spec
    if isinstance(spec, (list, tuple)) and len(spec) == 2:
        low, high = spec
        if 0 <= low <= high:
            return lambda draw: int(draw.rng.integers(low, high, endpoint=True))
    raise ValueError(f"_qen_count must be a count or a [low, high] range, got {spec!r}")


def _compile_repeated(schema: list, scope: FrozenSet[str]) -> Field:
    if not schema:
        return lambda draw, context: []

    item = schema[0]
    count = _counter(DEFAULT_COUNT)
    if isinstance(item, dict) and "_qen_provider" not in item:
        if "_qen_count" in item:
            count = _counter(item["_qen_count"])
        if "_qen_items" in item:
            item = item["_qen_items"]
        elif "_qen_count" in item:
            item = {k: v for k, v in item.items() if k != "_qen_count"}
    item_field = _compile(item, scope)

    def repeated(draw, context):
        return [item_field(draw, context) for _ in range(count(draw))]
    return repeated


# --- streams ---

class Schema:
    """a compiled schema and the seed its streams replay from"""

    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._field = _compile(schema, frozenset())
        if seed is None:
            # picked once, so every cursor over a stream sees the same records
            seed = int(np.random.default_rng().integers(2 ** 32))
        self._seed = seed

    @property
    def seed(self) -> int: return self._seed

    def _records(self) -> Iterator[Any]:
        draw = _Draw(self._seed)
        while True:
            yield self._field(draw, {})
            draw.index += 1

    def stream(self) -> LazyList:
        """an infinite lazy list of records"""
        return LazyList(self._records, INFINITE)

    def take(self, count: int) -> LazyList:
        """the first `count` records of the stream"""
        return self.stream().take(count)


def from_schema(schema: Any, seed: Optional[int] = None) -> Schema:
    return Schema(schema, seed)
