# mygl2d

mygl2d is a small 2D drawing toolkit built on pygame. It comes with a demo game.

The package has these parts:

- `mygl2d.shapes` computes vertex lists for rectangles, circles, ovals and polygons.
- `mygl2d.render` provides `Renderer`, which draws shapes and images onto a pygame surface.
- `mygl2d.tga` reads uncompressed true-colour Targa images (image types 2 and 10).
- `mygl2d.animation` provides sprite-sheet frames (`Frame`) and looping frame animation (`Animation`).
- `mygl2d.mouse` provides `Mouse`, which holds the mouse position and the state of the left and right buttons.
- `mygl2d.keys` holds key, mouse-button and window tokens, and converts pygame codes to them.
- `mygl2d.game` is the demo game.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Running the demo

```
mygl2d
```

The demo opens a 640×480 window and draws a circle outline in the middle. The mouse cursor is replaced by an animated spinner. The spinner changes frame once a second.

Pressing the left button inside the circle fills the circle. If `beep.mp3` can be loaded, the beep plays once per press. The cursor is kept inside the window. Press Escape or close the window to quit.

The demo loads its sprite sheet from `images/spin.tga`. It loads the sound from `beep.mp3`. Both paths are relative to the assets directory, which is the current directory unless you pass another one:

```
mygl2d --assets path/to/assets
```

If the sprite sheet cannot be read, the demo prints an error and uses an empty sprite. If the audio mixer cannot be started, the command exits with status -1.

## Using the library

### Drawing

```python
import pygame
from mygl2d.render import Renderer

pygame.init()
screen = pygame.display.set_mode((640, 480))
renderer = Renderer(screen)            # colour defaults to opaque white

renderer.clear()                       # fill with opaque black
renderer.draw_rect(10, 10, 100, 50)
renderer.fill_circle(320, 240, 32)
renderer.draw_polygon([(0, 0), (50, 0), (25, 40)])
pygame.display.flip()
```

`Renderer` has the following drawing methods:

- `draw_point`
- `draw_line`
- `draw_rect` and `fill_rect`
- `draw_circle` and `fill_circle`
- `draw_oval` and `fill_oval`
- `draw_polygon` and `fill_polygon`

Polygons with fewer than three points draw nothing. Filled circles, ovals and polygons are drawn as a fan of triangles from the first vertex.

To change the colour, set `renderer.color`.

### Images

`Renderer` also works with images:

- `load_targa(path)` returns a pygame surface.
- `draw_image(surface, x, y)` blits the whole surface.
- `draw_image_with_clip(surface, clip, x, y)` blits only the `Frame` given as `clip`.

`image_to_surface` turns a decoded `TgaImage` into a surface. It supports 3 and 4 channels.

### Geometry only

```python
from mygl2d.shapes import circle_outline, rect_outline

rect_outline(0, 0, 10, 5)   # [(0, 0), (10, 0), (10, 5), (0, 5)]
circle_outline(0, 0, 10)    # 100 rounded points on the circle
```

`circle_fan` and `oval_fan` return the centre point first, followed by 101 points around the rim.

### Reading TGA files

```python
from mygl2d.tga import read_targa, parse_targa

image = read_targa("images/spin.tga")
print(image.width, image.height, image.channels)
```

`parse_targa` decodes bytes that are already in memory. `TgaHeader.from_bytes` decodes only the 18-byte header.

The image rows are returned in reverse file order. The pixel bytes are kept as they are stored in the file.

`ValueError` is raised in these cases:

- the header is too short
- the image type is not supported
- the pixel data is truncated

### Animation

```python
from mygl2d.animation import Animation, Frame, clip_tex_coords

frames = [Frame(0, 0, 16, 16), Frame(16, 0, 16, 16)]
anim = Animation(frames, frame_duration=1.0)
anim.update(1.0)       # advances at most one frame per call, wrapping at the end
anim.frame             # Frame(x=16, y=0, w=16, h=16)

clip_tex_coords(64, 16, frames[1])   # (u1, v1, u2, v2), v measured from the bottom
```

### Input

To update the mouse state, call `Mouse.update(position, buttons)` with a position and the buttons held down (`MouseButton` values).

`mygl2d.keys` provides the following conversions:

- `key_from_pygame` converts pygame key codes.
- `mouse_button_from_pygame` converts pygame's 1-based mouse button numbers.
- `mouse_button_to_pygame` converts them back.

### Geometry helpers

`mygl2d.game` also exports small helpers:

- `inrect` tests whether a point is in a rectangle.
- `incirc` tests whether a point is in a circle.
- `rotate_point` rotates a point about a centre.
- `clamp_radians` removes whole turns from an angle.

## What it does not do

Drawing is done in software on pygame surfaces. There is no OpenGL context and no texture upload. `clip_tex_coords` only computes coordinates.

The TGA reader does not decode run-length-encoded pixel data. It does not handle colour-mapped images either.

## Tests

```
pytest
```