"""Executes console input as a command or a variable query or assignment."""

from __future__ import annotations

from typing import Protocol

from devshell.commands import CommandRegistry
from devshell.printing import Destination, Printer

__all__ = ["Console", "Variable", "VariableLookup"]


class Variable(Protocol):
    """A console variable as seen by the console."""

    component_count: int

    def to_string(self) -> str: ...

    def set_from_strings(self, values: list[str]) -> bool: ...


class VariableLookup(Protocol):
    """Finds global and per-client console variables by name."""

    def find(self, name: str) -> Variable | None: ...

    def find_local(self, local_client: int, name: str) -> Variable | None: ...


class Console:
    """Dispatches input lines to commands or console variables."""

    def __init__(
        self,
        commands: CommandRegistry,
        variables: VariableLookup,
        printer: Printer,
    ) -> None:
        self.commands = commands
        self.variables = variables
        self.printer = printer

    def _apply(self, var: Variable) -> bool:
        cmds = self.commands
        if cmds.argc() == 1:
            self.printer.println(Destination.CLIENT, "{}", var.to_string())
            return True
        count = max(var.component_count, 1)
        values = [cmds.argv(i) for i in range(1, count + 1)]
        return var.set_from_strings(values)

    def process_input(self, text: str, local_client: int | None = None) -> bool:
        """Run ``text``; return whether it named something that succeeded.

        A command is run; a variable given alone is printed, otherwise set
        from the following arguments. Per-client variables are searched only
        when ``local_client`` is given.
        """
        try:
            self.commands.take_input(text)
        except ValueError:
            return False

        name = self.commands.argv(0)
        fn = self.commands.find(name)
        if fn is not None:
            fn()
            return True

        var = self.variables.find(name)
        if var is not None:
            return self._apply(var)

        if local_client is not None:
            local = self.variables.find_local(local_client, name)
            if local is not None:
                return self._apply(local)
        return False