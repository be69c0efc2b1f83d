#!/usr/bin/env python3
from vt import tool_cli
import logging.config


def main():
    _run_main(tool_cli.interface_vt)


def _run_main(cli_fn, argv=None):
    import os
    import sys

    _, func = cli_fn(prog=os.path.basename(sys.argv[0]))
    if argv is None:
        argv = sys.argv[1:]

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {
                "stderr": {
                    "level": "DEBUG",
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                }
            },
            "filters": {},
            "formatters": {
                "default": {
                    "()": _LevelConditionalFormatter,
                    "default_fmt": "%(levelname)s:%(name)s: %(message)s",
                    "INFO": "%(name)s: %(message)s",
                }
            },
            "loggers": {"": {"handlers": ["stderr"], "level": "WARNING"}},
        }
    )

    sys.exit(func(argv))


class _LevelConditionalFormatter(logging.Formatter):
    def __init__(self, default_fmt, **perlevel_formats):
        super(_LevelConditionalFormatter, self).__init__()
        self._default_style = logging.PercentStyle(default_fmt)
        self._perlevel_styles = {
            level: logging.PercentStyle(fmt)
            for level, fmt in perlevel_formats.items()
        }

    def formatMessage(self, record):
        style = self._perlevel_styles.get(record.levelname, self._default_style)
        return style.format(record)


if __name__ == "__main__":
    main()
