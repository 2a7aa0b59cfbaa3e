"""
Окно просмотра: GLFW + OpenGL‑контекст, текстура трассировщика
на весь экран. P – сохранить снимок, Esc – закрыть.
"""

import glfw
from OpenGL import GL
from raytracer.core.input import InputManager
from raytracer.utils.logger import logger

class Viewer:
    """Окно + GLFW‑контекст + текстура, обновляемая по Tracer.update()."""
    def __init__(self, app):
        self.app = app
        extent = app.tracer.extent()

        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")

        self.handle = glfw.create_window(extent.width, extent.height, app.title, None, None)
        if not self.handle:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")

        glfw.make_context_current(self.handle)
        glfw.swap_interval(1)

        self.width, self.height = glfw.get_framebuffer_size(self.handle)
        self.input = InputManager(self.handle)
        glfw.set_framebuffer_size_callback(self.handle, self._on_resize)

        self.tex_id = GL.glGenTextures(1)
        GL.glBindTexture(GL.GL_TEXTURE_2D, self.tex_id)
        GL.glTexParameteri(GL.GL_TEXTURE_2D,
                           GL.GL_TEXTURE_MIN_FILTER, GL.GL_LINEAR)
        GL.glTexParameteri(GL.GL_TEXTURE_2D,
                           GL.GL_TEXTURE_MAG_FILTER, GL.GL_LINEAR)
        GL.glPixelStorei(GL.GL_UNPACK_ALIGNMENT, 1)
        self._upload()

    def _on_resize(self, _win, w, h):
        self.width, self.height = w, h

    # -----------------------------------------------------------------
    def _upload(self):
        """Пересоздать текстуру из текущего RGBA‑буфера."""
        extent = self.app.tracer.extent()
        GL.glBindTexture(GL.GL_TEXTURE_2D, self.tex_id)
        GL.glTexImage2D(GL.GL_TEXTURE_2D, 0, GL.GL_RGBA8,
                        extent.width, extent.height, 0,
                        GL.GL_RGBA, GL.GL_UNSIGNED_BYTE, self.app.tracer.bytes())

    def _draw(self):
        GL.glViewport(0, 0, self.width, self.height)
        GL.glClearColor(0.0, 0.0, 0.0, 1.0)
        GL.glClear(GL.GL_COLOR_BUFFER_BIT)

        GL.glEnable(GL.GL_TEXTURE_2D)
        GL.glBindTexture(GL.GL_TEXTURE_2D, self.tex_id)
        # строка 0 буфера – верх изображения
        GL.glBegin(GL.GL_QUADS)
        GL.glTexCoord2f(0.0, 1.0); GL.glVertex2f(-1.0, -1.0)
        GL.glTexCoord2f(1.0, 1.0); GL.glVertex2f(1.0, -1.0)
        GL.glTexCoord2f(1.0, 0.0); GL.glVertex2f(1.0, 1.0)
        GL.glTexCoord2f(0.0, 0.0); GL.glVertex2f(-1.0, 1.0)
        GL.glEnd()
        GL.glDisable(GL.GL_TEXTURE_2D)

    # -----------------------------------------------------------------
    def run(self):
        """Главный цикл окна."""
        logger.info("[Viewer] Window opened")
        while not glfw.window_should_close(self.handle):
            glfw.poll_events()

            if self.app.frame():
                self._upload()

            if self.input.consume_press(glfw.KEY_P):
                try:
                    self.app.capture()
                except OSError as exc:
                    logger.warning(f"[Viewer] Capture failed: {exc}")
            if self.input.consume_press(glfw.KEY_ESCAPE):
                glfw.set_window_should_close(self.handle, True)

            self._draw()
            glfw.swap_buffers(self.handle)

        self.close()

    def close(self):
        logger.info("[Viewer] Closing")
        GL.glDeleteTextures([self.tex_id])
        glfw.destroy_window(self.handle)
        glfw.terminate()
