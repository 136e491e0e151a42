# scripts/manage_products.py
# 사용법: python -m scripts.manage_products --help

import asyncio
from decimal import Decimal, InvalidOperation

import typer

from app.core import database
from app.core.logging import setup_logging
from app.domains.products import schemas as product_schemas
from app.domains.products.services import ProductService

cli = typer.Typer(help="Product API 운영용 명령어 모음입니다.")


async def _run_with_service(action):
    """
    독립 세션으로 ProductService 작업을 실행합니다.
    명령마다 asyncio.run이 새 이벤트 루프를 만들므로, 같은 루프 안에서 연결 풀을 정리합니다.
    """
    try:
        async with database.get_async_session_context() as db:
            return await action(ProductService(db))
    finally:
        await database.engine.dispose()


@cli.command("init-db")
def init_db():
    """
    누락된 데이터베이스 테이블을 생성합니다.
    """
    async def run_init():
        try:
            await database.create_db_and_tables()
        finally:
            await database.engine.dispose()

    asyncio.run(run_init())
    typer.echo("테이블 생성이 완료되었습니다.")


@cli.command("add")
def add_product(
    name: str = typer.Option(..., '--name', '-n', help="상품명"),
    description: str = typer.Option(..., '--description', '-d', help="상품 설명"),
    price: str = typer.Option(..., '--price', '-p', help="가격 (예: 19.99)"),
):
    """
    상품 하나를 생성하고 할당된 id를 출력합니다.
    """
    try:
        parsed_price = Decimal(price)
    except InvalidOperation:
        typer.echo(f"오류: 가격 형식이 올바르지 않습니다: {price}", err=True)
        raise typer.Exit(code=1)

    product_in = product_schemas.ProductCreate(name=name, description=description, price=parsed_price)

    created = asyncio.run(_run_with_service(lambda service: service.create_product(product_in)))
    typer.echo(f"상품이 생성되었습니다: id={created.id}")


@cli.command("list")
def list_products():
    """
    저장된 모든 상품을 출력합니다.
    """
    products = asyncio.run(_run_with_service(lambda service: service.get_all_products()))
    if not products:
        typer.echo("등록된 상품이 없습니다.")
        return
    for product in products:
        typer.echo(f"{product.id}\t{product.name}\t{product.price}\t{product.description}")


if __name__ == "__main__":
    setup_logging()
    cli()
