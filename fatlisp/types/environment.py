"""Runtime environment for fatlisp.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Scopes only ever point outward, so the
chain is acyclic by construction; a closure keeps its defining scope alive
simply by holding a reference to it.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Mapping, Optional, Sequence

from fatlisp.errors import FatlispResolutionError
from fatlisp.types.value import Identifier, Value

if TYPE_CHECKING:
    from fatlisp.reader.lexer import Token


class Environment:
    """Hierarchical mapping from names to fatlisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        self.outer: Environment | None = outer

    @classmethod
    def for_call(
        cls, parent: Environment, params: Sequence[Identifier], args: Sequence[Value]
    ) -> Environment:
        """Build the scope a function body runs in.

        Each parameter is bound, in declared order, to the matching argument.
        The caller has already checked that the counts agree.
        """
        env = cls(outer=parent)
        for param, arg in zip(params, args):
            env.set(param.name, arg)
        return env

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str, origin: Token | None = None) -> Value:
        """Look up the value bound to `name`, walking outward.

        Raises FatlispResolutionError, positioned at `origin`, if no scope in
        the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise FatlispResolutionError(f"unable to resolve '{name}'", origin)
        return env.vars[name]

    def set(self, name: str, value: Value) -> None:
        """Bind `name` in this scope only; outer scopes are never touched."""
        self.vars[name] = value

    def update(self, mapping: Mapping[str, Value]) -> None:
        for k, v in mapping.items():
            self.set(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
