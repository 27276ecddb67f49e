"""Keyboard and mouse bindings."""

import pygame

# Grid view movement
MOVEMENT_UP_KEY = pygame.K_s
MOVEMENT_DOWN_KEY = pygame.K_w
MOVEMENT_LEFT_KEY = pygame.K_d
MOVEMENT_RIGHT_KEY = pygame.K_a
MOVEMENT_SPEED_UP_KEY = pygame.K_LSHIFT

MOUSE_CELL_SELECT_BUTTON = pygame.BUTTON_LEFT
MOUSE_DRAG_BUTTON = pygame.BUTTON_MIDDLE

# Side panel
BIND_INSERTION_KEY = pygame.K_LCTRL
UNBIND_INSERTION_KEY = pygame.K_ESCAPE

# Simulation
PAUSE_TOGGLE_KEY = pygame.K_SPACE