import logging, functools, time
TRACE_LEVEL_NUM = 5
logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")

class _TraceLogger(logging.Logger):
    def trace(self, msg, *a, **k):
        if self.isEnabledFor(TRACE_LEVEL_NUM):
            self._log(TRACE_LEVEL_NUM, msg, a, **k)
logging.setLoggerClass(_TraceLogger)

_FMT = "%(asctime)s | %(levelname)s | %(name)s | device=%(device)s op=%(op)s | %(message)s"
_DATE = "%Y-%m-%d %H:%M:%S"

class _DeviceFields(logging.Filter):
    def filter(self, r):
        if not hasattr(r,"device"): r.device="-"
        if not hasattr(r,"op"): r.op="-"
        return True

def setup_logging(level: int | str = logging.INFO):
    if isinstance(level,str):
        lvl = logging.getLevelName(level.upper())
        level = lvl if isinstance(lvl,int) else logging.INFO
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter(_FMT,_DATE))
    h.addFilter(_DeviceFields())
    root.addHandler(h)

def get_logger(name: str) -> _TraceLogger:
    # loggers created before this module was imported are plain Loggers
    log = logging.getLogger(name)
    if not hasattr(log, "trace"):
        log.trace = functools.partial(log.log, TRACE_LEVEL_NUM)
    return log

def _fmt(v):
    if isinstance(v, float):
        return f"{v:.6g}"
    return repr(v)

def _device_of(a):
    # first positional arg is the bound instance for decorated methods
    return getattr(a[0], "name", "-") if a else "-"

def trace_calls(name: str|None=None, values: bool=False):
    def _wrap(fn):
        qual = name or f"{fn.__module__}.{fn.__qualname__}"
        log = get_logger(qual)
        @functools.wraps(fn)
        def _inner(*a, **k):
            extra = {"device": _device_of(a), "op": fn.__name__}
            log.trace("enter", extra=extra)
            if values:
                arg_s = ", ".join([*map(_fmt, a[1:]),
                                   *[f"{kk}={_fmt(v)}" for kk,v in k.items()]])
                log.trace(f"args: {arg_s}", extra=extra)
            t0=time.perf_counter()
            try:
                out=fn(*a, **k)
                dt=(time.perf_counter()-t0)*1000
                if values:
                    log.trace(f"ret: {_fmt(out)}", extra=extra)
                log.trace(f"exit ok in {dt:.2f} ms", extra=extra)
                return out
            except Exception as e:
                log.debug(f"exit err: {e}", extra=extra)
                raise
        return _inner
    return _wrap
