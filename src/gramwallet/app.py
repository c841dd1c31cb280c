"""Main entry point for Gram Wallet."""

import logging
import sys
import traceback

from .launcher import Launcher
from .utils import Config, log_error, setup_logging
from .version import __version__

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Main entry point."""
    argv = sys.argv if argv is None else argv
    config = Config()
    setup_logging(config.log_level)

    launcher = Launcher(argv, config=config)
    try:
        logger.info(f"Starting {config.app_name} v{__version__}")
        result = launcher.exec()
        logger.info(f"Application closed with code {result}")
        return result
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        return 0
    except Exception as e:
        logger.error(f"Fatal error in main(): {e}", exc_info=True)
        log_error("Fatal error in main()", e)
        # Try to show error dialog if Tkinter is partially working
        try:
            import tkinter as tk
            from tkinter import messagebox
            root = tk.Tk()
            root.withdraw()
            error_msg = f"Application failed to start.\n\nError: {e}\n\n{traceback.format_exc()}"
            messagebox.showerror(f"{config.app_name} Error", error_msg)
            root.destroy()
        except Exception as dialog_error:
            logger.debug(f"Could not show error dialog: {dialog_error}")
        raise


if __name__ == "__main__":
    sys.exit(main())
