"""Infrastructure layer — collaborator implementations and the workspace.

Depends on the domain models and third-party libs (pydantic, pluggy).
It must never import from services, commands, or output.
"""
