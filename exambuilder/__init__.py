"""Exam Builder: admin API for authoring multiple-choice tests."""
