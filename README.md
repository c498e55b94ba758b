# bonobo

Building blocks for small interactive 3D graphics applications that do not
depend on any windowing or rendering backend. Everything here works on plain
Python values and numpy arrays.

## Modules

- `bonobo.log` — `Logger`, which formats messages (`message % args`) and sends
  them to the enabled output targets: standard streams, a log file
  (`log.txt` by default) and a custom callback. Messages have a `Type`
  (`SUCCESS`, `INFO`, `WARNING`, `ERROR`, …), each with a prefix, a
  `Verbosity` (`WHISPER` drops the message, `LOUD` prepends
  `[file, function (line)]`) and a `Severity` (non-`OK` messages go to
  standard error; `TERMINAL` closes the log and raises `SystemExit(1)`).
  Targets are chosen with the `OutputTarget` flags. With
  `flags=MESSAGE_ONCE` or `flags=LOCATION_ONCE` a report is shown only once;
  `hit_count` tells how many times it was made. `report_param` reports
  `"Bad parameter!"` when its test is false. A `Logger` can be used as a
  context manager: entering opens the enabled outputs, leaving writes an end
  marker and closes the log file.
- `bonobo.log_view` — `LogView`, a fixed-size ring buffer (64 rows of at most
  511 characters by default) of recent messages. Given a logger, it installs
  itself as that logger's custom output. `entries(pattern)` yields `LogEntry`
  items from oldest to newest, filtered case-insensitively by a pattern of
  the form `"incl,-excl"`; `color_for(type)` gives an RGBA colour per
  message type; `clear()` empties it.
- `bonobo.files` — `slurp_file(path, logger)` returns a file's text up to its
  first NUL byte, or `""` (reporting an error to the logger, if given) when
  the file cannot be read.
- `bonobo.transform` — `TRSTransform`, a translation/rotation/scale transform
  composed as M = T · R · S. It offers relative (`translate`, `scale`,
  `rotate`, `rotate_x/y/z`, `pre_rotate…`) and absolute (`set_translate`,
  `set_scale`, `set_rotate…`) changes, `look_towards` and `look_at`, the
  model matrix and its inverse, the separate translation, rotation and scale
  matrices and their inverses, the local direction vectors (`up`, `down`,
  `left`, `right`, `front`, `back`), and a text form through `dumps` and
  `loads`. `rotation_matrix(angle, axis)` builds a 3×3 rotation.
- `bonobo.input` — `InputHandler`, fed with keyboard, mouse-button and
  mouse-motion events (`Action.PRESS` / `Action.RELEASE`) and advanced once
  per frame. `keycode_state`, `scancode_state` and `mouse_state` return
  `KeyState` flags: `PRESSED` or `RELEASED`, plus `JUST_PRESSED` /
  `JUST_RELEASED` during the frame after a change. It also remembers where
  the mouse was when each button last changed state, and whether the UI has
  captured the mouse or keyboard.
- `bonobo.camera` — `FPSCamera`, a perspective camera whose world transform
  moves with W/S/A/D/Q/E (Shift slows, Control speeds up) and turns while
  the left mouse button is held. It gives the matrices between clip, view
  and world space, `clip_to_view` and `clip_to_world` point conversions, and
  a text form through `dumps` and `loads`. `perspective(fovy, aspect, near,
  far)` builds the projection matrix.
- `bonobo.gldebug` — the `DebugType`, `DebugSource` and `DebugSeverity`
  enums with `type_name`, `source_name` and `severity_name`, and
  `handle_debug_message`, which logs a driver debug message as info,
  warning or error according to its severity, drops group markers and a few
  known noisy notices, and returns the log type used (or `None`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

A camera driven by input events:

```python
import math

from bonobo.camera import FPSCamera
from bonobo.input import KEY_W, Action, InputHandler, KeyState

camera = FPSCamera(math.radians(60.0), 16 / 9, 0.01, 1000.0)
inputs = InputHandler()

inputs.feed_keyboard(KEY_W, 17, Action.PRESS)
inputs.advance()

camera.update(0.016, inputs, False, False)
print(camera.world_to_clip_matrix())
print(bool(inputs.keycode_state(KEY_W) & KeyState.JUST_PRESSED))  # True
```

Transforms on their own:

```python
from bonobo.transform import TRSTransform

t = TRSTransform()
t.translate((1.0, 2.0, 3.0))
t.rotate_y(0.5)
text = t.dumps()

copy = TRSTransform()
copy.loads(text)
```

Logging into a view:

```python
import io

from bonobo.log import MESSAGE_ONCE, Logger, OutputTarget, Type
from bonobo.log_view import LogView

logger = Logger(stdout=io.StringIO())
logger.set_output_targets(OutputTarget.STD | OutputTarget.CUSTOM)
view = LogView(logger)

logger.report(Type.INFO, "Loaded %d meshes", 3)
for entry in view.entries():
    print(entry.type.name, entry.text, end="")  # INFO Loaded 3 meshes

logger.report(Type.INFO, "shown once", flags=MESSAGE_ONCE)
logger.report(Type.INFO, "shown once", flags=MESSAGE_ONCE)
print(logger.hit_count(Type.INFO, "shown once"))  # 2
```

## What this package does not do

It opens no windows and makes no graphics calls: there is no rendering,
shader compilation, mesh or texture loading, and no UI drawing. `LogView`
keeps the lines, colours and filter results a UI would show, but does not
draw them; `InputHandler` must be fed events from whatever window system
the application uses; `handle_debug_message` must be called by the
application with the messages its graphics driver reports.