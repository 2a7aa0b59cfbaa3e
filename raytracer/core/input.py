"""
Скрывает GLFW‑callback‑механику.
"""

import glfw

class InputManager:
    """Скрывает GLFW‑callback‑механику."""
    def __init__(self, window):
        self.window = window
        self.keys = {}
        self._pressed = set()
        self._setup_callbacks()

    def _setup_callbacks(self):
        glfw.set_key_callback(self.window, self._key_cb)

    def _key_cb(self, win, key, scancode, action, mods):
        if action == glfw.PRESS:
            self._pressed.add(key)
        self.keys[key] = action != glfw.RELEASE

    def is_key_pressed(self, key) -> bool:
        return self.keys.get(key, False)

    def consume_press(self, key) -> bool:
        """True один раз на каждое нажатие (без автоповтора)."""
        if key in self._pressed:
            self._pressed.discard(key)
            return True
        return False
