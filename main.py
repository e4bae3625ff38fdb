import sys

from loguru import logger
from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette

from tictactoe import config
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

def configure_logging(level=config.LOG_LEVEL):
    """
    Replace loguru's default sink with a stderr sink at the given level.
    """
    logger.remove()
    logger.add(sys.stderr, level=level)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the default dark theme palette using predefined constants.
    """
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.Window, config.WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, config.WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, config.BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, config.ALT_BASE_COLOR)
    palette.setColor(QPalette.Text, config.TEXT_COLOR)
    palette.setColor(QPalette.Button, config.BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, config.BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, config.HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, config.HIGHLIGHTED_TEXT_COLOR)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, config.DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, config.DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, config.DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main():
    configure_logging()
    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    logger.info("window shown")
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
