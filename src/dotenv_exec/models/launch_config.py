"""Launch configuration model for dotenv_exec."""

from pydantic import BaseModel, ConfigDict

DEFAULT_DOTENV_PATH = ".env"


class LaunchConfig(BaseModel):
    """What to load and what to run, built once from the command line."""

    model_config = ConfigDict(frozen=True)

    dotenv_path: str = DEFAULT_DOTENV_PATH
    replace: bool = False
    program: str
    program_args: tuple[str, ...] = ()
