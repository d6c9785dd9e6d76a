"""Kernel – errors and text primitives shared by every compiler."""
