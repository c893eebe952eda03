#2
import json
import traceback
from datetime import datetime, timezone
from logging import Formatter
from typing_extensions import override

class JsonFormatter(Formatter):
    @override
    def format(self, record):
        log_message = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S.%f"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "exception": traceback.format_exception(record.exc_info[1]) if record.exc_info and record.exc_info[1] else None
        }
        return json.dumps(log_message)

text_format = Formatter('%(asctime)s \t- %(name)s - %(levelname)s - %(message)s')
json_format = JsonFormatter()
