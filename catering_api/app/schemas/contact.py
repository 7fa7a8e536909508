"""Contact form payload.  Contact messages are forwarded, never stored."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ContactMessage(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)

    model_config = ConfigDict(str_strip_whitespace=True)


class ContactAck(BaseModel):
    message: str = "Message sent successfully"
