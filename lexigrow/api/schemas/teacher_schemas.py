from pydantic import BaseModel

class TeacherLoginRequest(BaseModel):
    password: str

class MessageResponse(BaseModel):
    message: str
