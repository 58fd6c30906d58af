"""Controllers orchestrating the rename engine for a front end."""

from dropname.controllers.rename_controller import RenameController

__all__ = ["RenameController"]
