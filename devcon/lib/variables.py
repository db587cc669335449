# devcon/lib/variables.py
#
# Variable store: named, typed values in creation order.
#
# Locking is NOT done here. The owning Console serializes every call through
# its single re-entrant lock (see devcon/core.py).

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from devcon.model.schema import VarKind

Value = Union[str, int, bool]

_DIGITS = frozenset("0123456789")


def is_integer(text: str) -> bool:
    """ASCII digits only; the empty string does not qualify."""
    return bool(text) and all(ch in _DIGITS for ch in text)


def infer_value(text: str) -> Tuple[VarKind, Value]:
    if is_integer(text):
        return VarKind.INTEGER, int(text)
    if text == "true":
        return VarKind.BOOL, True
    if text == "false":
        return VarKind.BOOL, False
    return VarKind.STRING, text


@dataclass
class Variable:
    name: str
    kind: VarKind
    value: Value

    def assign(self, kind: VarKind, value: Value) -> None:
        # kind and value always change together
        self.kind, self.value = kind, value


def format_variable(var: Variable) -> str:
    """Render as ``name = value`` (bare int, true/false, or "quoted")."""
    if var.kind is VarKind.INTEGER:
        shown = str(var.value)
    elif var.kind is VarKind.BOOL:
        shown = "true" if var.value else "false"
    elif var.kind is VarKind.STRING:
        shown = f'"{var.value}"'
    else:
        raise ValueError(f"Unknown variable kind: {var.kind!r}")
    return f"{var.name} = {shown}"


class VariableStore:
    """Maps name -> Variable, insertion ordered, never shrinks."""

    def __init__(self) -> None:
        self._vars: Dict[str, Variable] = {}

    # ------------------------------------------------------------------
    def find(self, name: str) -> Optional[Variable]:
        return self._vars.get(name)

    def set_or_create(self, name: str, text: str) -> Variable:
        kind, value = infer_value(text)
        var = self._vars.get(name)
        if var is None:
            var = Variable(name, kind, value)
            self._vars[name] = var
        else:
            var.assign(kind, value)
        return var

    def format(self, var: Variable) -> str:
        return format_variable(var)

    def get(self, name: str, default: Any = None) -> Any:
        var = self._vars.get(name)
        return default if var is None else var.value

    def names(self) -> List[str]:
        return list(self._vars)

    def as_dict(self) -> Dict[str, Value]:
        return {name: var.value for name, var in self._vars.items()}

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"VariableStore({self.as_dict()!r})"
