import logging
import logging.config
import pathlib
from typing import Optional, Union

import yaml

DEFAULT_CONFIG_PATH = pathlib.Path(__file__).parent.resolve() / 'logger_config.yaml'


class TraceLogger(logging.Logger):
    TRACE = 5
    def trace(self, msg, *args, **kwargs) -> None:
        self.log(self.TRACE, msg, *args, **kwargs)

# Register level name and custom class BEFORE dictConfig/getLogger
logging.addLevelName(TraceLogger.TRACE, "TRACE")
logging.setLoggerClass(TraceLogger)


def configure_logging(config_path: Optional[Union[str, pathlib.Path]] = None) -> dict:
    with open(config_path or DEFAULT_CONFIG_PATH, 'r') as f:
        config = yaml.safe_load(f)
    logging.config.dictConfig(config)
    return config
