import io

from devshell.commands import CommandRegistry
from devshell.console import Console
from devshell.devcon import GREETING, DevConsole
from devshell.printing import Printer


class FakeVar:
    def __init__(self, value, components=1, accept=True):
        self.value = value
        self.component_count = components
        self.accept = accept
        self.received = None

    def to_string(self):
        return self.value

    def set_from_strings(self, values):
        self.received = values
        return self.accept


class FakeVars:
    def __init__(self, globals_=None, locals_=None):
        self.globals = globals_ or {}
        self.locals = locals_ or {}

    def find(self, name):
        return self.globals.get(name)

    def find_local(self, local_client, name):
        return self.locals.get((local_client, name))


def make(vars_=None):
    out = io.StringIO()
    con = DevConsole(stdin=io.StringIO(), stdout=out)
    cmds = CommandRegistry()
    console = Console(cmds, vars_ or FakeVars(), Printer(devcon=con))
    return console, cmds, out


def test_runs_command():
    console, cmds, _ = make()
    calls = []
    cmds.add("quit", lambda: calls.append(cmds.args))
    assert console.process_input("quit now") is True
    assert calls == [["quit", "now"]]


def test_empty_input_fails():
    console, _, _ = make()
    assert console.process_input("") is False


def test_unknown_name_fails():
    console, _, _ = make()
    assert console.process_input("nothing here") is False


def test_query_prints_value():
    var = FakeVar("90")
    console, _, out = make(FakeVars({"cg_fov": var}))
    assert console.process_input("cg_fov") is True
    assert out.getvalue() == GREETING + "90\n"


def test_scalar_set_takes_one_value():
    var = FakeVar("0")
    console, _, _ = make(FakeVars({"v": var}))
    assert console.process_input("v 1 2 3") is True
    assert var.received == ["1"]


def test_vec3_set_fills_missing_with_empty():
    var = FakeVar("0 0 0", components=3)
    console, _, _ = make(FakeVars({"pos": var}))
    assert console.process_input("pos 1 2") is True
    assert var.received == ["1", "2", ""]


def test_set_failure_propagates():
    var = FakeVar("0", accept=False)
    console, _, _ = make(FakeVars({"v": var}))
    assert console.process_input("v x") is False


def test_local_variable_needs_client():
    var = FakeVar("1")
    vars_ = FakeVars(locals_={(2, "cl_drawfps"): var})
    console, _, _ = make(vars_)
    assert console.process_input("cl_drawfps 0") is False
    assert console.process_input("cl_drawfps 0", 2) is True
    assert var.received == ["0"]
    assert console.process_input("cl_drawfps 0", 1) is False


def test_global_preferred_over_local():
    g = FakeVar("g")
    loc = FakeVar("l")
    console, _, _ = make(FakeVars({"x": g}, {(0, "x"): loc}))
    assert console.process_input("x 5", 0) is True
    assert g.received == ["5"]
    assert loc.received is None


def test_command_preferred_over_variable():
    var = FakeVar("1")
    console, cmds, _ = make(FakeVars({"x": var}))
    hits = []
    cmds.add("x", lambda: hits.append(1))
    assert console.process_input("x 3") is True
    assert hits == [1]
    assert var.received is None