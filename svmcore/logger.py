from enum import IntEnum


class LogLevel(IntEnum):
    """Níveis de log, ordenados por verbosidade"""
    NONE = 0     # Sem log
    WARNING = 1  # Apenas avisos
    ERROR = 2    # Avisos e erros
    STEP = 3     # Erros e etapas
    MACRO = 4    # Erros, etapas e macros
    INFO = 5     # Erros, etapas, macros e info
    MICRO = 6    # Tudo, inclusive micro (por linha / por vetor)


class Logger:
    # Nível padrão (sobrescrito por SVMCORE_LOG_LEVEL via svmcore.config)
    _log_level = LogLevel.WARNING

    @classmethod
    def set_log_level(cls, level):
        """Define o nível de log (string ou LogLevel)"""
        if isinstance(level, str):
            level = level.upper()
            if level not in LogLevel.__members__:
                raise ValueError(f"Invalid log level: {level}. Choose from {list(LogLevel.__members__)}")
            level = LogLevel[level]
        cls._log_level = LogLevel(level)

    @classmethod
    def get_log_level(cls):
        return cls._log_level

    @staticmethod
    def info(msg):
        if Logger._log_level >= LogLevel.INFO:
            print(f"\033[1;32m[INFO]\033[0m {msg}")

    @staticmethod
    def step(msg):
        if Logger._log_level >= LogLevel.STEP:
            print(f"\033[1;34m[STEP]\033[0m {msg}")

    @staticmethod
    def error(msg, exc=None):
        """Loga ERROR se o nível permitir e, opcionalmente, levanta a exceção"""
        if Logger._log_level >= LogLevel.ERROR:
            error_msg = f"\033[1;31m[ERROR]\033[0m {msg}"
            if exc is not None:
                error_msg += f"\n\033[1;31m[EXCEPTION]\033[0m {type(exc).__name__}: {exc}"
            print(error_msg)
        if exc is not None:
            raise exc

    @staticmethod
    def bench(stage, t0, t1):
        if Logger._log_level >= LogLevel.INFO:
            Logger.info(f"{stage} completed in {t1 - t0:.3f} seconds")

    @staticmethod
    def macro(msg):
        if Logger._log_level >= LogLevel.MACRO:
            print(f"\033[1;33m[{'█' * 10}]\033[0m {msg}")

    @staticmethod
    def micro(msg):
        if Logger._log_level >= LogLevel.MICRO:
            print(f"\033[1;35m    [{'█' * 10}]\033[0m {msg}")

    @staticmethod
    def warning(msg):
        if Logger._log_level >= LogLevel.WARNING:
            print(f"\033[1;33m[WARNING]\033[0m {msg}")
