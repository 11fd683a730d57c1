"""
Ввод: GLFW‑события и отображение клавиш на команды сцены.
"""
