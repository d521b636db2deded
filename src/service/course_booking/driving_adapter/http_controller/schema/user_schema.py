"""
User API Schemas - Pydantic models for request/response
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr

from src.service.course_booking.domain.entity.user_entity import UserRole


class CreateUserRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'email': 'student@example.com',
                'password': 'P@ssw0rd',
                'name': 'Jane Doe',
                'role': 'student',
            }
        }
    )

    email: EmailStr
    password: SecretStr = Field(
        ...,
        min_length=8,
        max_length=30,
        description='Password must be 8-30 characters (bcrypt limit)',
    )
    name: str = Field(..., min_length=1, max_length=100)
    role: UserRole = UserRole.STUDENT


class LoginRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'email': 'student@example.com', 'password': 'P@ssw0rd'}}
    )

    email: EmailStr
    password: SecretStr = Field(..., min_length=1, max_length=72)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    role: UserRole
    is_active: bool
