# cubmap

`cubmap` reads scene descriptions for a small grid-based raycaster: the
`.cub` files that name four wall textures, a floor colour and a ceiling
colour, followed by the map itself. It checks every part of the file and
gives you either a validated `Scene` or a `CubError` that says what went
wrong. It also decodes the XPM images that wall textures are stored in.

## A scene file

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

        1111111111111
        1000000000001
111111111011000001111
100000000000000000001
1111111110110000011N1
        1000000000001
        1111111111111
```

* `NO`, `SO`, `WE` and `EA` each name one texture, exactly once.
* `F` and `C` give the floor and ceiling colour as three values from 0 to 255.
* The map uses `0` for floor, `1` for wall and spaces for nothing. Exactly
  one of `N`, `S`, `E` or `W` marks where the player stands and which way
  they face.
* The map must be closed: no floor may touch a space or the edge of the map.

## Reading a scene

```python
from cubmap.errors import CubError
from cubmap.parser import parse_file

try:
    scene = parse_file("maps/level.cub")
except CubError as error:
    print(error.report(), end="")
else:
    print(scene.textures.north, scene.textures.floor)
    print(scene.camera.pos, scene.camera.dir, scene.camera.plane)
```

`parse_file` reads the file and hands its lines to `parse_lines`, which you
can also call directly with lines already in memory (newlines kept). The
result is a `Scene` holding a `TextureSet` (`textures`) and a `MapGrid`
(`grid`, with its space-padded `rows`); `scene.camera` is the player's
`Camera`, built by `cubmap.scene.camera_for` from the start letter and its
cell. `CubError.report()` returns the message in the form
`"Error\n<message>\n"`.

The checks are also available on their own:

* `cubmap.mapgrid.check_extension(path, ".cub")` confirms that a path names a
  readable file (not a directory) with the expected extension; `parse_file`
  does not do this for you.
* `MapGrid.validate()` runs the map checks: empty map, too many or no
  players, open borders and unknown characters.
* `TextureSet.check()` confirms that all four textures and both colours were
  given, and that no texture was given twice.

## Textures

```python
from cubmap.xpm import xpm_file_to_image

image = xpm_file_to_image("textures/north.xpm")
pixel = image.get_pixel(0, 0)
```

`xpm_to_image` does the same for XPM strings already in memory. Images are
32-bit pixel buffers made by `cubmap.pixels.new_image`; `byte_order` 0 stores
pixels little endian, 1 big endian, and `Image.data_info()` returns the raw
buffer with its bits per pixel, line size and endianness. Colours marked
`None` in an XPM become the pixel value `0xFF000000`. Colour names are
resolved with `cubmap.colornames.lookup_color`, which knows the usual X11
colour names, ignoring case. A `PixelFormat` converts a 0xRRGGBB colour to
the layout of a display with less than 24 bits of depth.

## What it does not do

`cubmap` only reads and validates scenes and decodes textures. It opens no
window, draws nothing, casts no rays and handles no keyboard or mouse input;
there is no command to run. A program that shows the scene has to do that
with the `Scene` and the images this package gives it.

## Tests

Install the `test` extra and run the test suite with pytest.