from datetime import datetime

from pydantic import BaseModel


class InstalledModIn(BaseModel):
    name: str = ""
    custom_name: str = ""
    logical_file_name: str = ""


class InstalledModOut(BaseModel):
    id: int
    mod_id: str
    name: str
    custom_name: str
    logical_file_name: str
    installed_at: datetime
