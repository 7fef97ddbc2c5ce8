"""Toll fee calculator package."""
