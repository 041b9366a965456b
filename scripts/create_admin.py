# flake8: noqa
# scripts/create_admin.py

import asyncio

import typer
from fastapi import HTTPException

from backoffice.core.database import engine, get_async_session_context
from backoffice.domains.user import crud as user_crud
from backoffice.domains.user import schemas as user_schemas
from backoffice.domains.user.models import UserRole

cli = typer.Typer()


async def create_director(user_in: user_schemas.UserCreate) -> bool:
    """
    director 역할의 관리자 계정을 생성합니다.
    이메일이 이미 있거나 입력값이 잘못되면 메시지를 출력하고 False 를 반환합니다.
    """
    try:
        async with get_async_session_context() as db:
            await user_crud.user.create(db, obj_in=user_in)
    except HTTPException as e:
        print(f"오류: {e.detail}")
        return False
    finally:
        await engine.dispose()
    return True


@cli.command()
def main(
    email: str = typer.Option(
        ..., '--email', '-e',
        prompt="관리자 이메일을 입력하세요",
        help="로그인에 사용할 이메일 주소입니다."
    ),
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="관리자 비밀번호를 입력하세요",
        hide_input=True,
        confirmation_prompt=True,
        help="비밀번호입니다. (최소 8자 이상)"
    ),
    name: str = typer.Option(
        "Director", '--name', '-n',
        help="관리자의 표시 이름입니다."
    ),
):
    """
    백오피스의 모든 메뉴(사용자 관리 포함)에 접근할 수 있는 director 계정을 생성합니다.
    """
    print("관리자 계정 생성을 시작합니다...")
    user_in = user_schemas.UserCreate(
        email=email,
        password=password,
        name=name,
        role=UserRole.DIRECTOR.value,
    )
    if not asyncio.run(create_director(user_in)):
        raise typer.Exit(code=1)
    print(f"관리자 계정이 성공적으로 생성되었습니다: {email}")


if __name__ == "__main__":
    cli()
