"""Soilwatch - backend for soil and plant monitoring sensors."""
