"""Letter Boxed solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Letter Boxed solver."""

    dictionary_path: str = "american_english_dictionary.txt"
    """Word list file, one word per line.  Default: american_english_dictionary.txt."""

    number_of_words: int = 2
    """Default number of words per solution. More than 2 can take a long time. Default: 2."""

    parallel: bool = False
    """Whether to shard the search across worker processes. Default: False."""

    max_workers: int | None = None
    """Maximum number of worker processes to use. If None (default), uses os.cpu_count() - 1."""

    chunksize: int = 16
    """Number of first-word shards sent to a worker at a time. Default: 16."""

    deterministic: bool = True
    """Whether to keep the word list sorted, for a reproducible solution order. Default: True."""

    log_dir: str = "logs"
    """Directory for per-run log files. Default: logs."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
