from pydantic import BaseModel

from ._version import __version__

DEFAULT_USER_AGENT = f"authhelper-python/{__version__}"


class Config(BaseModel):
    debug: bool = False
    follow_redirects: bool = True
    user_agent: str = DEFAULT_USER_AGENT
