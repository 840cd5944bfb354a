"""Adapter package for the controller factory's external collaborators.

Purpose:
    Concrete implementations of the domain ports: element libraries
    (in-memory tree, tkinter widgets) and the model subsystem (pydantic).

Dependencies:
    ``dom_tk`` needs a Tk runtime, ``model_pydantic`` needs ``pydantic``;
    ``dom_memory`` is dependency-free.

Call context:
    Imported by ``fabui.app.runtime`` for default wiring and by tests.
"""
