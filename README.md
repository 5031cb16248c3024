# recursia

`recursia` draws the Flag of Recursia. The flag is a decagon that is split
into acute and obtuse golden triangles, and each of those triangles is split
again, recursively. The package also contains the small toolkit that the
drawing and its demos rely on:

- `recursia.geometry`: frozen integer `Point`, `Rectangle` and `Vector2D`
  dataclasses. `point - point` gives a `Vector2D`, and `point + vector` and
  `point - vector` give a `Point`. A vector can be scaled with `*` and `/`,
  and the components are truncated toward zero.
- `recursia.color`: an immutable 24-bit `Color`. You can build one from RGB
  components, from `Color.from_hex`, from `Color.from_hsv` or from
  `Color.random`. The named presets are `Color.WHITE`, `Color.BLACK`,
  `Color.RED`, `Color.GREEN`, `Color.BLUE`, `Color.YELLOW`, `Color.CYAN`,
  `Color.MAGENTA` and `Color.GRAY`.
- `recursia.font`: `Font` together with the `FontFamily` and `FontStyle`
  enums. A `Font` is immutable. The methods `with_family`, `with_style`,
  `with_size` and `with_color` each return a new `Font`.
  `library_font_string()` gives a string of the form `Family[-STYLE]-size`,
  and the family name in it depends on the platform.
- `recursia.timer`: `Timer`, a stopwatch that adds up time over several
  `start()`/`stop()` intervals. It also works as a context manager.
- `recursia.flag`: the recursive drawing functions `draw_flag_of_recursia`,
  `draw_acute_triangle`, `draw_obtuse_triangle` and `place_decagon_in`, plus
  `scramble`, a 32-bit xorshift helper.
- `recursia.chisquared`: `is_close`, a chi-squared goodness-of-fit check for
  random experiments.
- `recursia.color_console`: `ColorConsole`, a writable text stream that keeps
  the style (`ConsoleStyle`, `ConsoleFontStyle`) of each run of text and can
  render itself as HTML.
- `recursia.console_utils`: prompts for integers, yes/no answers, menu
  selections and file selections. Each prompt reads from and writes to the
  streams you pass in, or to stdin and stdout if you pass none.
- `recursia.registry`: `DemoRegistry`, `DemoConfig` and `MenuOption` for
  collecting named demos in menu order, with optional test barriers, and
  `console_main` for driving a text menu.

The package depends only on the Python standard library and needs
Python 3.10 or later.

## Drawing the flag

The flag code never draws pixels itself. You pass it a callback, and the
callback is called once for every triangle with the triangle's three corners
and its fill color. The function returns the number of triangles it drew.

```python
from recursia.geometry import Rectangle
from recursia.flag import draw_flag_of_recursia

triangles = []

def draw(p0, p1, p2, color):
    triangles.append((p0, p1, p2, color.to_html()))

count = draw_flag_of_recursia(Rectangle(0, 0, 500, 300), draw)
assert count == len(triangles)
```

Acute triangles are filled with `CARDINAL` and obtuse triangles with
`SANDSTONE`. The ten slices of the decagon are drawn at recursion orders 0
through 9.

## Colors

```python
from recursia.color import Color

teal = Color(0, 128, 128)
teal.to_html()                  # '#008080'
str(Color.from_hex(0xFFFF00))   # 'Color.YELLOW'
Color.from_hsv(0.5, 1.0, 1.0)   # Color(0, 255, 255)
```

Components outside the accepted range raise `ValueError`.

## Checking randomness

```python
import random
from recursia.chisquared import is_close

fair_die = [1 / 6] * 6
is_close(fair_die, lambda: random.randrange(6))   # True, barring a one-in-a-million fluke
```

`is_close` runs the experiment 100,000 times. It raises `ValueError` in two
cases: when the experiment returns an outcome outside the range of the
probabilities, and when there are more than 250 outcomes.

## A styled console

```python
from recursia.color import Color
from recursia.color_console import ColorConsole, ConsoleFontStyle

console = ColorConsole(on_update=print)
console.write("plain ")
with console.styled(color=Color.RED, style=ConsoleFontStyle.BOLD):
    console.write("alert")
console.flush()   # renders the HTML and passes it to on_update
```

## A console menu

```python
from recursia.registry import DemoConfig, DemoRegistry, console_main

registry = DemoRegistry(DemoConfig(window_title="Demos", menu_order=("demos.py",)))

@registry.handler("Say hello", filename="demos.py", line=1)
def hello():
    print("Hello!")

console_main(registry)
```

A demo appears in the menu only if its file is listed in `menu_order`.
When a demo's file has an entry in `test_barriers`, the demo runs only if
the `failing_tests` callback given to `DemoRegistry` reports no failures for
the barrier's files. Otherwise a message names the failing files and asks
you to press Enter.

## What the package does not do

There is no graphical window, button bar or canvas. To see the flag, you
render the triangles from the drawing callback with whatever graphics
library you like. `ColorConsole` produces HTML, and showing it is up to you.
The registry starts with no demos registered, and the package installs no
command. You start the menu by calling `console_main` from your own code.

## Running the tests

Install the `test` extra, then run `pytest` from the project directory.