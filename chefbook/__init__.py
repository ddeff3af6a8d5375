"""Chefbook: CRUD API for chefs, ingredients and recipes."""

__version__ = "0.1.0"
