"""Runtime container that receives control once startup is resolved."""

import logging
import os
import platform

import customtkinter as ctk

from ..core.models import FilteredArguments, LaunchContext

logger = logging.getLogger(__name__)

# Configure CustomTkinter theme
ctk.set_appearance_mode("system")
ctk.set_default_color_theme("blue")


class Sandbox:
    """Owns the Tk event loop for the lifetime of the application.

    Only the filtered arguments reach Tk; the opened resource stays on the
    launch context for the application to pick up.
    """

    def __init__(self, context: LaunchContext, arguments: FilteredArguments):
        self.context = context
        self.arguments = arguments

        # macOS Retina scaling works, on other systems it is left to Tk
        if platform.system() != "Darwin":
            ctk.deactivate_automatic_dpi_awareness()

        base_name = os.path.basename(arguments.values[0]) if arguments.count else None
        self.root = ctk.CTk(baseName=base_name, className=context.app_name.replace(" ", ""))
        self.root.title(context.app_name)

    def exec(self) -> int:
        logger.info(f"Entering main loop (working path {self.context.working_path})")
        if self.context.opened_url:
            logger.info(f"Pending opened resource: {self.context.opened_url}")
        self.root.mainloop()
        logger.info("Main loop finished")
        return 0
