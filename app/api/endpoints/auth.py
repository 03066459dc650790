# app/api/endpoints/auth.py
# Cookie session login for the admin dashboard.
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.deps.auth import get_current_user, login_session, logout_session
from app.models.auth import User
from app.schemas.auth import LoginIn, PasswordChangeIn, UserOut, UserUpdate
from app.services.passwords import hash_password, needs_rehash, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login")
def login(payload: LoginIn, request: Request, db: Session = Depends(get_db)):
    username = payload.username.strip()
    user = db.scalar(select(User).where(User.username == username))
    if not user or not verify_password(payload.password, user.hashed_password or ""):
        logger.info("Failed login for %s", username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    if needs_rehash(user.hashed_password):
        user.hashed_password = hash_password(payload.password)
        db.commit()

    login_session(request, user)
    return {"message": "Login successful", "user": UserOut.model_validate(user)}


@router.post("/logout")
def logout(request: Request):
    logout_session(request)
    return {"message": "Logged out successfully"}


@router.get("/me")
def me(current_user: User = Depends(get_current_user)):
    return {"user": UserOut.model_validate(current_user)}


@router.put("/me")
def update_me(
    payload: UserUpdate,
    request: Request,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    patch = payload.model_dump(exclude_unset=True, exclude_none=True)
    errors = []
    if "username" in patch:
        taken = db.scalar(select(User.id).where(User.username == patch["username"], User.id != current_user.id))
        if taken is not None:
            errors.append({"path": ["username"], "message": "Username already taken", "code": "duplicate"})
    if "email" in patch:
        taken = db.scalar(select(User.id).where(User.email == patch["email"], User.id != current_user.id))
        if taken is not None:
            errors.append({"path": ["email"], "message": "Email already in use", "code": "duplicate"})
    if errors:
        raise HTTPException(status_code=400, detail={"message": "Invalid data", "errors": errors})

    for key, value in patch.items():
        setattr(current_user, key, value)
    db.commit()
    db.refresh(current_user)
    login_session(request, current_user)
    return {"message": "Profile updated successfully", "user": UserOut.model_validate(current_user)}


@router.put("/me/password")
def change_password(
    payload: PasswordChangeIn,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    if not verify_password(payload.current_password, current_user.hashed_password or ""):
        raise HTTPException(
            status_code=400,
            detail={
                "message": "Invalid data",
                "errors": [{"path": ["currentPassword"], "message": "Current password is incorrect", "code": "invalid"}],
            },
        )
    current_user.hashed_password = hash_password(payload.new_password)
    db.commit()
    return {"message": "Password updated successfully"}
