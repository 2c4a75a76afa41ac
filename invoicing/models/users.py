# invoicing/models/users.py

from pydantic import BaseModel, EmailStr, Field


class User(BaseModel):
    id: str
    name: str
    email: str
    password: str

    class Config:
        from_attributes = True


class Credentials(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
