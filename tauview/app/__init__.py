"""QML-facing application facade, session and state objects.

This package implements the QML<->Python boundary:
- Request/response commands: backend.request(cmd, payload)
- Fire-and-forget notifications: backend.dispatch(name, payload)
- UI binding via backend.gallery (GalleryState)
- Python->QML notifications via backend.event
"""
