"""Input and window tokens, plus conversion from pygame key and button codes.

Printable keys are identified by their Latin-1 code point, with letters in
upper case. Keys above ``Key.SPECIAL`` stand for non-printable keys.
"""

from __future__ import annotations

import enum

import pygame


class Action(enum.IntEnum):
    """State of a key or mouse button."""

    RELEASE = 0
    PRESS = 1


class Key(enum.IntEnum):
    """Non-printable keys, plus the space bar and the unknown key."""

    UNKNOWN = -1
    SPACE = 32
    SPECIAL = 256
    ESC = 257
    F1 = 258
    F2 = 259
    F3 = 260
    F4 = 261
    F5 = 262
    F6 = 263
    F7 = 264
    F8 = 265
    F9 = 266
    F10 = 267
    F11 = 268
    F12 = 269
    F13 = 270
    F14 = 271
    F15 = 272
    F16 = 273
    F17 = 274
    F18 = 275
    F19 = 276
    F20 = 277
    F21 = 278
    F22 = 279
    F23 = 280
    F24 = 281
    F25 = 282
    UP = 283
    DOWN = 284
    LEFT = 285
    RIGHT = 286
    LSHIFT = 287
    RSHIFT = 288
    LCTRL = 289
    RCTRL = 290
    LALT = 291
    RALT = 292
    TAB = 293
    ENTER = 294
    BACKSPACE = 295
    INSERT = 296
    DEL = 297
    PAGEUP = 298
    PAGEDOWN = 299
    HOME = 300
    END = 301
    KP_0 = 302
    KP_1 = 303
    KP_2 = 304
    KP_3 = 305
    KP_4 = 306
    KP_5 = 307
    KP_6 = 308
    KP_7 = 309
    KP_8 = 310
    KP_9 = 311
    KP_DIVIDE = 312
    KP_MULTIPLY = 313
    KP_SUBTRACT = 314
    KP_ADD = 315
    KP_DECIMAL = 316
    KP_EQUAL = 317
    KP_ENTER = 318
    KP_NUM_LOCK = 319
    CAPS_LOCK = 320
    SCROLL_LOCK = 321
    PAUSE = 322
    LSUPER = 323
    RSUPER = 324
    MENU = 325
    LAST = 325


class MouseButton(enum.IntEnum):
    """Mouse buttons; LEFT, RIGHT and MIDDLE are aliases of the first three."""

    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    LAST = 7
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class WindowMode(enum.IntEnum):
    """How a window is opened."""

    WINDOW = 0x00010001
    FULLSCREEN = 0x00010002


class WindowParam(enum.IntEnum):
    """Window parameters that can be queried or hinted."""

    OPENED = 0x00020001
    ACTIVE = 0x00020002
    ICONIFIED = 0x00020003
    ACCELERATED = 0x00020004
    RED_BITS = 0x00020005
    GREEN_BITS = 0x00020006
    BLUE_BITS = 0x00020007
    ALPHA_BITS = 0x00020008
    DEPTH_BITS = 0x00020009
    STENCIL_BITS = 0x0002000A
    REFRESH_RATE = 0x0002000B
    ACCUM_RED_BITS = 0x0002000C
    ACCUM_GREEN_BITS = 0x0002000D
    ACCUM_BLUE_BITS = 0x0002000E
    ACCUM_ALPHA_BITS = 0x0002000F
    AUX_BUFFERS = 0x00020010
    STEREO = 0x00020011
    WINDOW_NO_RESIZE = 0x00020012
    FSAA_SAMPLES = 0x00020013
    OPENGL_VERSION_MAJOR = 0x00020014
    OPENGL_VERSION_MINOR = 0x00020015
    OPENGL_FORWARD_COMPAT = 0x00020016
    OPENGL_DEBUG_CONTEXT = 0x00020017
    OPENGL_PROFILE = 0x00020018


class EnableToken(enum.IntEnum):
    """Features that can be switched on and off."""

    MOUSE_CURSOR = 0x00030001
    STICKY_KEYS = 0x00030002
    STICKY_MOUSE_BUTTONS = 0x00030003
    SYSTEM_KEYS = 0x00030004
    KEY_REPEAT = 0x00030005
    AUTO_POLL_EVENTS = 0x00030006


def _pygame_code(*names: str) -> int | None:
    """Return the first pygame key constant among ``names`` that exists."""
    for name in names:
        code = getattr(pygame, name, None)
        if code is not None:
            return code
    return None


_SPECIAL_KEY_NAMES: dict[Key, tuple[str, ...]] = {
    Key.ESC: ("K_ESCAPE",),
    **{Key[f"F{n}"]: (f"K_F{n}",) for n in range(1, 26)},
    Key.UP: ("K_UP",),
    Key.DOWN: ("K_DOWN",),
    Key.LEFT: ("K_LEFT",),
    Key.RIGHT: ("K_RIGHT",),
    Key.LSHIFT: ("K_LSHIFT",),
    Key.RSHIFT: ("K_RSHIFT",),
    Key.LCTRL: ("K_LCTRL",),
    Key.RCTRL: ("K_RCTRL",),
    Key.LALT: ("K_LALT",),
    Key.RALT: ("K_RALT",),
    Key.TAB: ("K_TAB",),
    Key.ENTER: ("K_RETURN",),
    Key.BACKSPACE: ("K_BACKSPACE",),
    Key.INSERT: ("K_INSERT",),
    Key.DEL: ("K_DELETE",),
    Key.PAGEUP: ("K_PAGEUP",),
    Key.PAGEDOWN: ("K_PAGEDOWN",),
    Key.HOME: ("K_HOME",),
    Key.END: ("K_END",),
    **{Key[f"KP_{n}"]: (f"K_KP{n}", f"K_KP_{n}") for n in range(10)},
    Key.KP_DIVIDE: ("K_KP_DIVIDE",),
    Key.KP_MULTIPLY: ("K_KP_MULTIPLY",),
    Key.KP_SUBTRACT: ("K_KP_MINUS",),
    Key.KP_ADD: ("K_KP_PLUS",),
    Key.KP_DECIMAL: ("K_KP_PERIOD",),
    Key.KP_EQUAL: ("K_KP_EQUALS",),
    Key.KP_ENTER: ("K_KP_ENTER",),
    Key.KP_NUM_LOCK: ("K_NUMLOCK", "K_NUMLOCKCLEAR"),
    Key.CAPS_LOCK: ("K_CAPSLOCK",),
    Key.SCROLL_LOCK: ("K_SCROLLOCK", "K_SCROLLLOCK"),
    Key.PAUSE: ("K_PAUSE",),
    Key.LSUPER: ("K_LSUPER", "K_LGUI", "K_LMETA"),
    Key.RSUPER: ("K_RSUPER", "K_RGUI", "K_RMETA"),
    Key.MENU: ("K_MENU",),
}

_SPECIAL_KEYS: dict[int, Key] = {}
for _key, _names in _SPECIAL_KEY_NAMES.items():
    _code = _pygame_code(*_names)
    if _code is not None:
        _SPECIAL_KEYS.setdefault(_code, _key)


def key_from_pygame(code: int) -> int:
    """Convert a pygame key code into a key identifier.

    Special keys come back as ``Key`` members, printable keys as their
    Latin-1 code point (letters in upper case), anything else as
    ``Key.UNKNOWN``.
    """
    special = _SPECIAL_KEYS.get(code)
    if special is not None:
        return special
    if code == Key.SPACE:
        return Key.SPACE
    if 32 < code < 127:
        return ord(chr(code).upper())
    if 160 <= code <= 255:
        return code
    return Key.UNKNOWN


_FROM_PYGAME_BUTTON: dict[int, MouseButton] = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
    4: MouseButton.BUTTON_4,
    5: MouseButton.BUTTON_5,
    6: MouseButton.BUTTON_6,
    7: MouseButton.BUTTON_7,
    8: MouseButton.BUTTON_8,
}

_TO_PYGAME_BUTTON: dict[MouseButton, int] = {
    button: number for number, button in _FROM_PYGAME_BUTTON.items()
}


def mouse_button_from_pygame(button: int) -> MouseButton:
    """Convert a pygame mouse button number (1-based) into a ``MouseButton``."""
    try:
        return _FROM_PYGAME_BUTTON[button]
    except KeyError:
        raise ValueError(f"unknown pygame mouse button: {button!r}") from None


def mouse_button_to_pygame(button: int) -> int:
    """Convert a ``MouseButton`` into the pygame mouse button number."""
    try:
        return _TO_PYGAME_BUTTON[MouseButton(button)]
    except (KeyError, ValueError):
        raise ValueError(f"unknown mouse button: {button!r}") from None