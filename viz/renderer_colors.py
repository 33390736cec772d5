# viz/renderer_colors.py
# rich color names
CAGE = "blue"
SNAKE = "green"
FRUIT = "red"
TEXT = "red"
