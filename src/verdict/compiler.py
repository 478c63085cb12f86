"""Rule compilation — raw declarations to an ordered list of ``RuleSpec``.

Accepted declaration shapes, per field::

    "required|between:5,10|in:foo,bar"        # pipe string
    RuleSpec("between", ("5", "10"))           # structured record
    {"name": "between", "parameters": [5, 10]} # mapping record
    ["required", {"name": "email"}, MyRule()]  # mixed sequence, flattened

A bare top-level string (no field map) compiles under the default field
key. The compiler never raises: anything it cannot make sense of becomes
an ``UnknownRule`` carrying the original value, and the strategy decides
what an unresolvable rule name means.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from verdict._internal.types import Parameters, RuleDeclaration
from verdict.rules.base import RuleHandler

DEFAULT_FIELD = "_default"
UNKNOWN_RULE = "unknown"


@dataclass(frozen=True, slots=True)
class RuleSpec:
    """One rule applied to one field: a name and its parameters.

    ``parameters`` is a tuple for positional parameters (always strings
    when parsed from a rule string) or a read-only mapping for named ones.

    Specs compare by value. They hash only when every parameter is
    hashable. Named parameters, or a parameter value such as a list,
    make ``hash()`` raise ``TypeError``. Nothing in verdict hashes specs.
    """

    name: str
    parameters: Parameters = ()


@dataclass(frozen=True, slots=True)
class UnknownRule(RuleSpec):
    """Placeholder for a declaration element that names no rule.

    ``raw`` keeps the original element for diagnostics.
    """

    raw: Any = field(default=None, compare=False)


class CompiledRules:
    """Raw and compiled rules for one ``validate()`` call.

    A field whose compiled list is empty counts as having no rule:
    ``has_rule()`` returns ``False`` and the strategy skips it.
    """

    __slots__ = ("_compiled", "_raw")

    def __init__(self, rules: Mapping[str, RuleDeclaration] | None = None) -> None:
        self._raw: dict[str, Any] = {}
        self._compiled: dict[str, tuple[RuleSpec, ...]] = {}
        for field_name, declaration in (rules or {}).items():
            self.add_rule(field_name, declaration)

    @property
    def raw(self) -> dict[str, Any]:
        """The declarations as given, for auditing."""
        return dict(self._raw)

    @property
    def compiled(self) -> dict[str, tuple[RuleSpec, ...]]:
        return dict(self._compiled)

    def add_rule(self, field_name: str, declaration: RuleDeclaration) -> None:
        """Compile *declaration* and append it to *field_name*'s rules."""
        if field_name not in self._raw:
            self._raw[field_name] = declaration
        elif isinstance(self._raw[field_name], list):
            self._raw[field_name] = [*self._raw[field_name], declaration]
        else:
            self._raw[field_name] = [self._raw[field_name], declaration]

        existing = self._compiled.get(field_name, ())
        self._compiled[field_name] = (*existing, *normalize(declaration))

    def has_rule(self, field_name: str) -> bool:
        return bool(self._compiled.get(field_name))

    def get_rule(self, field_name: str) -> tuple[RuleSpec, ...]:
        return self._compiled.get(field_name, ())

    def fields(self) -> Iterator[str]:
        return iter(self._compiled)

    def __len__(self) -> int:
        return len(self._compiled)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompiledRules):
            return NotImplemented
        return self._compiled == other._compiled

    def __repr__(self) -> str:
        return f"CompiledRules({self._compiled!r})"


def compile_rules(
    rules: Mapping[str, RuleDeclaration] | str,
    *,
    default_field: str = DEFAULT_FIELD,
) -> CompiledRules:
    """Compile a field map, or a bare rule string, into ``CompiledRules``."""
    if isinstance(rules, str):
        return CompiledRules({default_field: rules})
    return CompiledRules(rules)


def normalize(declaration: RuleDeclaration) -> list[RuleSpec]:
    """Turn one field's declaration into its ordered ``RuleSpec`` list."""
    match declaration:
        case str():
            return parse_rule_string(declaration)
        case RuleSpec():
            return [declaration]
        case Mapping() if "name" in declaration:
            return [_from_record(declaration)]
        case list() | tuple():
            specs: list[RuleSpec] = []
            for element in declaration:
                specs.extend(_normalize_element(element))
            return specs
        case _:
            return [_from_object(declaration)]


def parse_rule_string(rule_string: str) -> list[RuleSpec]:
    """Parse ``"required|between:5,10"`` into rule specs.

    Empty segments (``"a||b"``) are skipped. Only the first colon of a
    segment separates the name from its parameters.
    """
    specs: list[RuleSpec] = []
    for segment in rule_string.split("|"):
        if not segment:
            continue
        name, sep, rest = segment.partition(":")
        specs.append(RuleSpec(name, parse_parameters(rest) if sep else ()))
    return specs


def parse_parameters(source: str) -> tuple[str, ...]:
    """Split a parameter string on commas that sit outside double quotes.

    ``'"a,b",c'`` -> ``("a,b", "c")``. Quote characters are dropped;
    ``\\"`` yields a literal quote without opening or closing a quoted
    run. The last parameter is always emitted, so ``""`` -> ``("",)``.
    """
    params: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    while i < len(source):
        char = source[i]
        if char == "\\" and i + 1 < len(source) and source[i + 1] == '"':
            current.append('"')
            i += 2
            continue
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            params.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    params.append("".join(current))
    return tuple(params)


def _normalize_element(element: Any) -> list[RuleSpec]:
    match element:
        case str():
            return parse_rule_string(element)
        case RuleSpec():
            return [element]
        case Mapping() if "name" in element:
            return [_from_record(element)]
        case Mapping() | list() | tuple():
            # Nested collections are not flattened further
            return [UnknownRule(UNKNOWN_RULE, (), raw=element)]
        case _:
            return [_from_object(element)]


def _from_record(record: Mapping[str, Any]) -> RuleSpec:
    name = record["name"]
    if not isinstance(name, str) or not name:
        return UnknownRule(UNKNOWN_RULE, (), raw=record)

    raw_params = record.get("parameters")
    match raw_params:
        case None:
            params: Parameters = ()
        case str():
            params = parse_parameters(raw_params)
        case Mapping():
            params = MappingProxyType(dict(raw_params))
        case list() | tuple():
            params = tuple(raw_params)
        case _:
            params = (raw_params,)
    return RuleSpec(name, params)


def _from_object(obj: Any) -> RuleSpec:
    """Name an arbitrary object: a handler's ``name``, or its own ``__str__``."""
    if isinstance(obj, RuleHandler) and isinstance(obj.name, str) and obj.name:
        return RuleSpec(obj.name)
    if obj is not None and type(obj).__str__ is not object.__str__:
        text = str(obj)
        if text:
            return RuleSpec(text)
    return UnknownRule(UNKNOWN_RULE, (), raw=obj)
