# volray/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер + OpenGL‑сообщения для отладки просмотрщика.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("VolRay")

logger = init_logger()

def gl_check_error(context: str = ""):
    """Проверить glGetError и вывести в лог, если что‑то не так."""
    # Импорт здесь: трассировщик работает и без OpenGL‑контекста
    from OpenGL import GL, GLU

    err = GL.glGetError()
    if err != GL.GL_NO_ERROR:
        msg = GLU.gluErrorString(err).decode()
        logger.error(f"OpenGL error {msg} [{context}]")
