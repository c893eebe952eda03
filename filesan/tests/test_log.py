import json
import tempfile
import logging
from unittest import TestCase
from pathlib import Path
import filesan.config
import filesan.log
from filesan.files import escape_filename
from filesan.flags import Mode
from filesan.log import json_format, text_format

class TestLog(TestCase):
    def test_json_format(self):
        record = logging.LogRecord("filesan.escaping", logging.WARNING, __file__, 1, "Escaped %s.", ("NUL",), None)
        data = json.loads(json_format.format(record))
        self.assertEqual("WARNING", data["level"])
        self.assertEqual("filesan.escaping", data["name"])
        self.assertEqual("Escaped NUL.", data["message"])
        self.assertIsNone(data["exception"])

    def test_json_format_exception(self):
        try:
            raise ValueError("bad")
        except ValueError as e:
            record = logging.LogRecord("filesan", logging.ERROR, __file__, 1, "Failed.", None, (type(e), e, e.__traceback__))
        data = json.loads(json_format.format(record))
        self.assertIn("ValueError: bad", "".join(data["exception"]))

    def test_text_format(self):
        record = logging.LogRecord("filesan.files", logging.INFO, __file__, 1, "hello", None, None)
        self.assertTrue(text_format.format(record).endswith("- filesan.files - INFO - hello"))

class TestLoggingSetup(TestCase):
    def setUp(self):
        super().setUp()
        import config
        self._root = config.logging.root
        self._tmp = tempfile.TemporaryDirectory()
        config.logging.root = Path(self._tmp.name)
        self._handlers = {name: list(logging.getLogger(name).handlers) for name in ["", "filesan"]}
        self._levels = {name: logging.getLogger(name).level for name in ["", "filesan"]}
        self._propagate = logging.getLogger("filesan").propagate
    def tearDown(self):
        super().tearDown()
        import config
        for name, handlers in self._handlers.items():
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                if handler not in handlers:
                    logger.removeHandler(handler)
                    handler.close()
            logger.setLevel(self._levels[name])
        logging.getLogger("filesan").propagate = self._propagate
        config.logging.root = self._root
        self._tmp.cleanup()

    def test_library_writes_no_files(self):
        self.assertFalse(hasattr(filesan.log, "configure_logging"))
        self.assertFalse(hasattr(filesan.config, "logging"))
        escape_filename("NUL.txt", Mode.ALL)
        self.assertEqual([], list(Path(self._tmp.name).iterdir()))

    def test_configure_logging(self):
        import log
        output = Path(self._tmp.name)/"run"
        output.mkdir()
        (output/"old.txt").write_text("old")
        log.configure_logging(name="run")
        self.assertTrue((Path(self._tmp.name)/"bin"/"old.txt").exists())
        names = sorted(it.name for it in output.iterdir())
        self.assertEqual(2, len(names))
        self.assertTrue(names[0].endswith(" - filesan.txt"))
        self.assertTrue(names[1].endswith(" - others.txt"))
