
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from opportunities.db.session import get_db
from opportunities.core.config import settings
from opportunities.core.security import create_access_token, hash_password, verify_password

from opportunities.api.deps import get_current_user
from opportunities.models.user import User
from opportunities.schemas.user import UserCreate, AdminCreate, ProfileUpdate, Token, User as UserSchema
from opportunities.services.profile import update_profile

router = APIRouter(prefix="/auth", tags=["auth"])


def _token_for(user: User) -> Token:
    return Token(
        access_token=create_access_token(user.id),
        token_type="bearer",
        user=UserSchema.model_validate(user),
    )


def _create_account(db: Session, body: UserCreate, role: str) -> User:
    if db.query(User).filter(User.email == body.email).first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )
    user = User(
        email=body.email,
        password_hash=hash_password(body.password),
        first_name=body.first_name,
        last_name=body.last_name,
        nickname=body.nickname,
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, db: Session = Depends(get_db)):
    return _token_for(_create_account(db, body, role="user"))


@router.post("/admin/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def admin_register(body: AdminCreate, db: Session = Depends(get_db)):
    if body.admin_secret != settings.ADMIN_SECRET_KEY:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin secret",
        )
    return _token_for(_create_account(db, body, role="admin"))


@router.post("/login", response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == form_data.username).first()
    if not user or not verify_password(form_data.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is inactive",
        )
    return _token_for(user)


@router.get("/user", response_model=UserSchema)
def read_user(current_user: User = Depends(get_current_user)):
    """The authenticated user's profile."""
    return current_user


@router.patch("/user", response_model=UserSchema)
def patch_user(
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Update the caller's profile. Name and nickname changes are copied onto
    every listing the caller has submitted.
    """
    return update_profile(db, current_user, data)
