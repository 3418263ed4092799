"""
User endpoints.

The device has at most one user record.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from dreamweaver.api.dependencies import get_data_manager
from dreamweaver.schemas.user import User, UserCreate, UserUpdate
from dreamweaver.services.data_manager import DataManager

router = APIRouter()


@router.get("", summary="Get the device user.", response_model=User)
async def get_user(manager: DataManager = Depends(get_data_manager)):
    user = await manager.get_current_user()
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.put("", summary="Create or replace the device user.", response_model=User)
async def put_user(data: UserCreate, manager: DataManager = Depends(get_data_manager)):
    user = data.to_entity()
    await manager.save_user(user)
    return user


@router.patch("", summary="Partially update the device user.", response_model=User)
async def patch_user(data: UserUpdate, manager: DataManager = Depends(get_data_manager)):
    user = await manager.update_user(data)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
