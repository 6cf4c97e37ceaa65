"""
AllWaysCalc Test Suite

Tests are organized by domain:
- test_unit_conversion.py / test_pixel_em.py: conversion engine and sync
- test_calculators.py / test_calculator_forms.py: formulas and form validation
- test_*_routes.py: HTML pages, suggestions and error pages
- test_public_api.py / test_algebra_solver.py: JSON API and the AI tutor
"""
