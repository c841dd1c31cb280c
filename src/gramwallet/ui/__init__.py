"""Runtime collaborators started by the launcher.

``sandbox`` needs a working Tk installation, so nothing is imported here;
use ``gramwallet.ui.sandbox`` and ``gramwallet.ui.platform`` directly.
"""
