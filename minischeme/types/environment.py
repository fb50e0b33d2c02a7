"""Runtime environment for minischeme.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Lookup walks the chain outwards; `define`
only ever writes to the frame it is called on.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from minischeme import LispValue
from minischeme.errors import ArityMismatch, TypeMismatch, UnboundSymbol
from minischeme.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises TypeMismatch if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise TypeMismatch(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name` in this frame or any outer one.

        Raises UnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbol(f"Unbound symbol: {name}")
        return env.vars[name]

    def extend(self, params: Iterable[Symbol], args: list[LispValue]) -> Environment:
        """Create a child frame binding `params` positionally to `args`."""
        params = tuple(params)
        if len(params) != len(args):
            raise ArityMismatch(
                f"Expected {len(params)} argument(s), given {len(args)}"
            )
        child = Environment(outer=self)
        for name, value in zip(params, args):
            child.define(name, value)
        return child

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Whole-chain representation for debugging."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
