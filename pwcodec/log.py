# --------------------------------------------------------------
# File: log.py
# Description: Configuración de logging estructurado para los consumidores del códec.
# --------------------------------------------------------------
"""Envoltorio de `structlog` sobre destinos de `loguru`.

El códec no registra nada por sí mismo; este módulo lo usan las capas que lo
consumen (por ejemplo la interfaz Streamlit) para dejar constancia de los
fallos de verificación.

`structlog` construye y renderiza cada entrada; `loguru` la escribe en los
destinos configurados y se encarga de la rotación, la compresión y la
retención de los ficheros.

Hay dos perfiles:

* `production`: JSON por línea, nivel INFO, marca `ts` en segundos epoch,
  pila adjunta a partir de ERROR, rotación y muestreo opcionales.
* `development`: salida de consola legible en stderr, nivel DEBUG, marca ISO y
  pila adjunta a partir de WARNING.
"""

from __future__ import annotations

import itertools
import logging
import os
import sys
import threading
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import structlog
from loguru import logger as _loguru
from pydantic import BaseModel, Field

from pwcodec import config as settings

__all__ = [
    "CodecLogger",
    "LoggingConfig",
    "RollConfig",
    "Sampler",
    "SamplingConfig",
    "configure_from_env",
    "development",
    "production",
    "retention_policy",
]

# Sin el destino por defecto de loguru cada entrada saldría duplicada en stderr.
_loguru.remove()

_SINK_IDS = itertools.count(1)

_METHOD_LEVELS: Dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}


class RollConfig(BaseModel):
    """Fichero rotativo.

    Attributes:
        file (str): Ruta del fichero activo.
        max_size_mb (float): Tamaño en MB a partir del cual se rota.
        max_backups (int): Copias antiguas conservadas.
        max_age_days (float | None): Antigüedad máxima de las copias; `None`
            no las borra por edad.
        compress (bool): Comprime con gzip las copias rotadas.

    """

    file: str
    max_size_mb: float = Field(default=100, gt=0)
    max_backups: int = Field(default=5, ge=1)
    max_age_days: Optional[float] = Field(default=None, gt=0)
    compress: bool = False


class SamplingConfig(BaseModel):
    """Política de muestreo por ventana de tiempo."""

    tick: float = Field(default=1.0, gt=0)
    initial: int = Field(default=100, ge=0)
    thereafter: int = Field(default=100, ge=0)


class LoggingConfig(BaseModel):
    """Parámetros comunes a los perfiles de producción y desarrollo."""

    name: str = "pwcodec"
    log_files: List[str] = Field(default_factory=lambda: ["stderr"])
    roll: bool = False
    roll_config: Optional[RollConfig] = None
    sampler: bool = False
    sampling_config: SamplingConfig = Field(default_factory=SamplingConfig)
    initial_fields: Dict[str, Any] = Field(default_factory=dict)
    disable_caller: bool = False
    disable_stacktrace: bool = False


class Sampler:
    """Procesador que limita entradas repetidas dentro de cada ventana.

    Para cada par (nivel, evento) deja pasar las `initial` primeras entradas de
    la ventana y después una de cada `thereafter`; el resto se descarta.
    """

    def __init__(
        self,
        tick: float,
        initial: int,
        thereafter: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._tick = tick
        self._initial = initial
        self._thereafter = thereafter
        self._clock = clock
        self._lock = threading.Lock()
        self._window_start = clock()
        self._counts: Dict[Tuple[str, Any], int] = {}

    def __call__(self, logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        key = (method_name, event_dict.get("event"))
        with self._lock:
            now = self._clock()
            if now - self._window_start >= self._tick:
                self._window_start = now
                self._counts.clear()
            count = self._counts.get(key, 0) + 1
            self._counts[key] = count

        if count <= self._initial:
            return event_dict
        if self._thereafter and (count - self._initial) % self._thereafter == 0:
            return event_dict
        raise structlog.DropEvent


class CodecLogger:
    """Logger configurado: métodos por nivel, `flush()` y `close()`.

    Las llamadas de nivel (`info`, `error`, `bind`...) se delegan en el logger
    de `structlog` subyacente.
    """

    def __init__(self, logger: Any, handler_ids: List[int]) -> None:
        self.logger = logger
        self._handler_ids = handler_ids
        self.closed = False

    def __getattr__(self, name: str) -> Any:
        return getattr(self.logger, name)

    def flush(self) -> None:
        _loguru.complete()

    def close(self) -> None:
        """Cierra todos los destinos; llamadas repetidas no tienen efecto."""

        if self.closed:
            return
        self.closed = True
        for handler_id in self._handler_ids:
            _loguru.remove(handler_id)

    def __enter__(self) -> "CodecLogger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def retention_policy(active: str, max_backups: int, max_age_days: Optional[float]) -> Callable[[List[Any]], None]:
    """Construye la función de retención de loguru para un fichero rotativo.

    Borra las copias con más de `max_age_days` días y, del resto, conserva
    solo las `max_backups` más recientes. El fichero activo nunca se toca.

    Args:
        active (str): Ruta del fichero activo.
        max_backups (int): Copias antiguas conservadas.
        max_age_days (float | None): Antigüedad máxima en días.

    Returns:
        Callable[[List[Any]], None]: Función que recibe la lista de ficheros.

    """

    active_path = os.path.abspath(active)

    def apply(files: List[Any]) -> None:
        backups = [str(f) for f in files if os.path.abspath(str(f)) != active_path]
        backups.sort(key=os.path.getmtime, reverse=True)
        cutoff = time.time() - max_age_days * 86400 if max_age_days else None
        for index, path in enumerate(backups):
            if index >= max_backups or (cutoff is not None and os.path.getmtime(path) < cutoff):
                os.remove(path)

    return apply


def _sink_kwargs(sink_id: int, level: int) -> Dict[str, Any]:
    return {
        "level": level,
        "format": "{message}",
        "filter": lambda record: record["extra"].get("codec_sink") == sink_id,
        "colorize": False,
        "catch": False,
    }


def _open_sinks(paths: List[str], sink_id: int, level: int) -> List[int]:
    """Abre los destinos; `stderr` y `stdout` son nombres especiales."""

    handler_ids: List[int] = []
    try:
        for path in paths:
            if path == "stderr":
                sink: Any = sys.stderr
            elif path == "stdout":
                sink = sys.stdout
            else:
                sink = path
            handler_ids.append(_loguru.add(sink, **_sink_kwargs(sink_id, level)))
    except OSError:
        for handler_id in handler_ids:
            _loguru.remove(handler_id)
        raise
    return handler_ids


def _open_roll(roll: RollConfig, sink_id: int, level: int) -> List[int]:
    handler_id = _loguru.add(
        roll.file,
        rotation=int(roll.max_size_mb * 1024 * 1024),
        retention=retention_policy(roll.file, roll.max_backups, roll.max_age_days),
        compression="gz" if roll.compress else None,
        encoding="utf-8",
        **_sink_kwargs(sink_id, level),
    )
    return [handler_id]


def _attach_stack_from(level: int) -> Callable[..., Dict[str, Any]]:
    """Marca `stack_info` en las entradas de nivel `level` o superior."""

    def processor(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        if _METHOD_LEVELS.get(method_name, logging.NOTSET) >= level:
            event_dict.setdefault("stack_info", True)
        return event_dict

    return processor


def _build(
    config: LoggingConfig,
    sink_id: int,
    handler_ids: List[int],
    *,
    level: int,
    stack_level: int,
    timestamper: structlog.processors.TimeStamper,
    renderer: Callable[..., Any],
) -> CodecLogger:
    processors: List[Callable[..., Any]] = []
    if config.sampler:
        sampling = config.sampling_config
        processors.append(Sampler(sampling.tick, sampling.initial, sampling.thereafter))
    processors += [structlog.processors.add_log_level, timestamper]
    if not config.disable_caller:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ],
                additional_ignores=[__name__],
            )
        )
    if not config.disable_stacktrace:
        processors += [
            _attach_stack_from(stack_level),
            structlog.processors.StackInfoRenderer(additional_ignores=[__name__]),
        ]
    processors += [structlog.processors.format_exc_info, renderer]

    logger = structlog.wrap_logger(
        _loguru.bind(codec_sink=sink_id),
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
    fields = {key: config.initial_fields[key] for key in sorted(config.initial_fields)}
    return CodecLogger(logger.bind(logger=config.name, **fields), handler_ids)


def production(config: LoggingConfig) -> CodecLogger:
    """Logger JSON de nivel INFO sobre ficheros o un fichero rotativo.

    Args:
        config (LoggingConfig): Destinos, rotación, muestreo y campos fijos.

    Returns:
        CodecLogger: Logger listo para usar; llama a `close()` al terminar.

    """

    sink_id = next(_SINK_IDS)
    if config.roll:
        if config.roll_config is None:
            raise ValueError("roll=True requires roll_config")
        handler_ids = _open_roll(config.roll_config, sink_id, logging.INFO)
    else:
        handler_ids = _open_sinks(config.log_files, sink_id, logging.INFO)

    return _build(
        config,
        sink_id,
        handler_ids,
        level=logging.INFO,
        stack_level=logging.ERROR,
        timestamper=structlog.processors.TimeStamper(fmt=None, key="ts"),
        renderer=structlog.processors.JSONRenderer(sort_keys=True),
    )


def development(config: LoggingConfig) -> CodecLogger:
    """Logger de consola en stderr con nivel DEBUG."""

    sink_id = next(_SINK_IDS)
    return _build(
        config,
        sink_id,
        _open_sinks(["stderr"], sink_id, logging.DEBUG),
        level=logging.DEBUG,
        stack_level=logging.WARNING,
        timestamper=structlog.processors.TimeStamper(fmt="iso"),
        renderer=structlog.dev.ConsoleRenderer(colors=False),
    )


def _parse_sampling(value: str) -> Optional[SamplingConfig]:
    if not value:
        return None
    initial, thereafter, tick = (part.strip() for part in value.split(","))
    return SamplingConfig(tick=float(tick), initial=int(initial), thereafter=int(thereafter))


def configure_from_env() -> CodecLogger:
    """Construye el logger a partir de las variables `PWCODEC_LOG_*`."""

    sampling = _parse_sampling(settings.LOG_SAMPLING)
    roll_config = None
    if settings.LOG_ROLL_FILE:
        roll_config = RollConfig(
            file=settings.LOG_ROLL_FILE,
            max_size_mb=settings.LOG_ROLL_MAX_MB,
            max_backups=settings.LOG_ROLL_BACKUPS,
            max_age_days=settings.LOG_ROLL_MAX_AGE_DAYS,
            compress=settings.LOG_ROLL_COMPRESS,
        )
    config = LoggingConfig(
        name=settings.LOG_NAME,
        log_files=settings.LOG_FILES,
        roll=roll_config is not None,
        roll_config=roll_config,
        sampler=sampling is not None,
        sampling_config=sampling or SamplingConfig(),
    )
    if settings.LOG_MODE == "development":
        return development(config)
    return production(config)
