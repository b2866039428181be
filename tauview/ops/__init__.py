"""Use-case / operations layer.

Side-effecting actions invoked by the backend (moving files to the trash).
Kept free of UI concerns; confirmation prompts belong to the QML shell.
"""
