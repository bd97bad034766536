#!/usr/bin/env python
"""Desktop app entrypoint for HabitWeek."""

import flet as ft

from habitweek.desktop.app import main

if __name__ == "__main__":
    ft.app(target=main)
