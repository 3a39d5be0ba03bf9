'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
seeded record generator for linqy test fixtures.
'''

import numpy as np
from faker import Faker
from linqy import List
from typing import Any, Dict, Optional


class Generator:
    """
    schema interpreter.

    a schema is a dict of field -> rule, where a rule is one of:
      - a faker provider name, e.g. 'word'
      - (provider, kwargs), e.g. ('pyint', {'min_value': 1, 'max_value': 9})
      - {'_qen_provider': 'choice', 'from': [...]}
      - {'_qen_provider': 'ref', 'key': 'other_field'}
      - {'_qen_provider': 'literal', 'value': ...}
      - {'_qen_provider': 'sequence', 'start': n}: n, n + 1, ... across records
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._counters: Dict[str, int] = {}

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, field: str, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        if provider == "sequence":
            current = self._counters.get(field, config.get("start", 0))
            self._counters[field] = current + 1
            return current

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        """builds one record; fields are generated in schema order so refs can look back"""
        record: Dict[str, Any] = {}
        for field, rule in schema.items():
            if isinstance(rule, dict) and "_qen_provider" in rule:
                record[field] = self._resolve_provider(field, rule, record)
            elif isinstance(rule, tuple) and len(rule) == 2 and isinstance(rule[1], dict):
                record[field] = self._resolve_faker_method(rule[0], rule[1])
            elif isinstance(rule, str) and hasattr(self._fake, rule):
                record[field] = self._resolve_faker_method(rule)
            else:
                record[field] = rule
        return record


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> List:
        """generates count records into a mutable linqy List"""
        return List([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
