# io/search_logging.py
import json
import logging
import sys

from city_astar.search.hooks import NoopHooks


def _default_json_logger(name="city_astar", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for search runs.
    run_start/run_end at INFO; expansions at DEBUG, sampled, only when debug is on.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def run_start(self, *, start, goal, nodes):
        self._emit("INFO", "run_start", start=start, goal=goal, nodes=nodes)

    def expand(self, node, *, f_cost, open_size, expanded):
        if self.debug and (expanded % self.sample_every) == 0:
            self._emit(
                "DEBUG", "expand", node=node, f_cost=f_cost, open_size=open_size, expanded=expanded
            )

    def run_end(self, *, outcome, distance, expanded, **extra):
        self._emit("INFO", "run_end", outcome=outcome, distance=distance, expanded=expanded, **extra)

    def error(self, *, reason: str, exc: BaseException | None = None, **extra):
        if exc is not None:
            extra["error"] = str(exc)
        self._emit("ERROR", "search_error", reason=reason, **extra)
