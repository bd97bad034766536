"""Flet desktop renderer for HabitWeek."""
