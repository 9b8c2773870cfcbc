import logging
import re

import colorlog


class CenteredLevelFormatter(colorlog.ColoredFormatter):
    def format(self, record):
        s = super().format(record)

        # Center the level name found between " - " separators
        match = re.search(r'(- )(\w+)( -)', s)
        if match:
            centered_level = match.group(2).center(8)
            s = s[:match.start(2)] + centered_level + s[match.end(2):]
        return s


def setup_logging(level: str = "INFO"):
    """Configure application-wide logging with colors."""

    custom_log_colors = {
        'DEBUG': 'cyan',
        'INFO': 'green',
        'WARNING': 'yellow',
        'ERROR': 'red',
        'CRITICAL': 'bold_red',
    }

    log_format = (
        '%(log_color)s[PcmSilence] %(asctime)s - %(levelname)s - %(module)-16s%(reset)s >> '
        '%(log_color)s%(message)s'
    )

    app_formatter = CenteredLevelFormatter(
        log_format,
        datefmt='%Y-%m-%d %H:%M:%S',
        log_colors=custom_log_colors
    )

    handler = colorlog.StreamHandler()
    handler.setFormatter(app_formatter)

    logging.basicConfig(
        level=level.upper(),
        handlers=[handler],
        force=True
    )
