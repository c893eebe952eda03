#1
import sys
import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime
import config
import filesan.log

def configure_logging(console: bool = False, name: str = "main"):
    date = datetime.now().strftime("%Y-%m-%d %H-%M-%S")
    root = config.logging.root
    output = root / name
    bin = root / "bin"
    if not output.exists(): output.mkdir(parents=True)
    if not bin.exists(): bin.mkdir()
    for file in output.iterdir(): file.rename(bin / file.name)

    #handlers
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(filesan.log.text_format)
    file_handlers = {}
    for handler_name, formatter in [("filesan", filesan.log.json_format), ("others", filesan.log.text_format)]:
        handler = RotatingFileHandler(filename=output / f"{date} - {handler_name}.txt", mode="w", maxBytes=1024*1024, backupCount=3, encoding='utf-8')
        handler.setFormatter(formatter)
        file_handlers[handler_name] = handler

    #loggers
    root_logger = logging.getLogger()
    root_logger.addHandler(file_handlers["others"])
    package_logger = logging.getLogger("filesan")
    package_logger.propagate = False
    package_logger.addHandler(file_handlers["filesan"])
    for logger in [root_logger, package_logger]:
        if console:
            logger.addHandler(console_handler)
        logger.setLevel(logging.INFO)
