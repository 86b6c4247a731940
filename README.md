# devshell

The developer-facing layer of a small game engine: a console command
registry, console input dispatch, a developer console on standard input,
per-client prompt buffers, formatted printing, asset path lookup and
local-client (splitscreen) state. Plain Python, no third-party dependencies.

## Contents

- `devshell.commands.CommandRegistry`: named console commands (`add`,
  `exists`, `find`, `remove`, `clear`) plus the argument list of the most
  recent input line (`take_input`, `push_front`, `argc`, `argv`).
  `take_input` raises `ValueError` for an empty line; `argv` returns `""`
  for an index past the end.
- `devshell.console.Console`: runs one line of input with
  `process_input(text, local_client=None)`. A registered command is called;
  otherwise a console variable with that name is printed (when given alone)
  or set from the following arguments. Variables are supplied by any object
  matching the `VariableLookup` protocol (`find`, `find_local`), whose
  results match the `Variable` protocol (`component_count`, `to_string`,
  `set_from_strings`). Returns whether the input named something that
  succeeded.
- `devshell.devcon.DevConsole`: reads whole lines from an input stream
  without blocking (`frame`, `has_text`, `take_text`) and writes text with
  `print_message`. It prints a greeting when created and holds at most one
  line at a time.
- `devshell.devgui.PromptBuffer` and `devshell.devgui.DevGui`: a line-editing
  buffer beginning with the `"> "` prompt (`type_char`, `backspace`,
  `clear`, `has_text`, `take_text`), one per local client in `DevGui`.
- `devshell.printing.Printer`: `print`, `println` and their debug-only
  variants `dprint`, `dprintln`, using `str.format` syntax and routed by
  `Destination` (`DEVCON`, `CLIENT`, `ERR`). Client output goes to a
  `DevConsole` if one is given, else to standard output. `error` and
  `errorln` write to standard error and raise `FatalError`, which carries
  `code` and `message`.
- `devshell.assets.AssetDatabase`: resolves paths under `<root>/assets` by
  `AssetType` and reads shaders (text), fonts and images (bytes), and opens
  maps as binary streams.
- `devshell.clients.ClientManager`: keyboard/mouse focus, key focus
  (`KeyFocus`), activation, splitscreen viewports (`Rect`) for the four
  `LocalClient`s, requested movement velocity from held keys, and mouse-look
  deltas.
- Helpers: `devshell.parsing` (`split`, `parse_bool`, `parse_int`,
  `parse_float`, `parse_vec`, `parse_vec2`/`3`/`4`, `format_vec`),
  `devshell.mathutil` (`next_pow2`, `prev_pow2`, `sin`, `asin`, `cos`,
  `acos`, `tan`, `atan`), and the string helpers in `devshell.strcompare`
  (`equals`, `iequals`, `contains`, `to_lower`), `devshell.strsearch`
  (`find_char`, `rfind_char`, `find_any`, `rfind_any`, `find_not_any`) and
  `devshell.strslice` (`char_at`, `substr`, `tokenize`).

## Installation

```
pip install .
```

## Example

```python
from devshell.commands import CommandRegistry
from devshell.parsing import parse_vec3, format_vec

registry = CommandRegistry()
registry.add("hello", lambda: print("hi"))

registry.take_input("hello  world")
print(registry.argc())   # 2
print(registry.argv(1))  # "world"
registry.find("hello")()

print(format_vec(parse_vec3("1 2.5 3")))  # "1 2.5 3"
```

## What it does not do

- There is no game loop, renderer, window or command to run: the package is
  a library of pieces that a game's frame loop calls.
- It has no console-variable store of its own; `Console` works with whatever
  object you pass as its variable lookup.
- `AssetDatabase.open_map` only opens the map file; map contents are not
  parsed or loaded.
- `DevGui` does not read keyboard events; feed typed characters to
  `PromptBuffer.type_char` yourself.
- `ClientManager.movement` and `look` return the requested velocity and
  turn; nothing moves a player or camera.

## Running the tests

```
pip install .[test]
pytest
```