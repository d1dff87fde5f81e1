NUL = 0
CTRL_C = 3
BACKSPACE_CTRL_H = 8
ENTER = 13
CTRL_R = 18
BACKSPACE = 127

QUIT_KEYS = frozenset({CTRL_C})
RESTART_KEYS = frozenset({CTRL_R})
BACKSPACE_KEYS = frozenset({BACKSPACE, BACKSPACE_CTRL_H})
IGNORED_KEYS = frozenset({NUL, ENTER})
