import pytest_asyncio

from chatstore.database import Database
from chatstore.repositories import SchemaManager, UserRepository, ChatRepository


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite'}", echo=False)
    yield db
    await db.close()


@pytest_asyncio.fixture
async def session(database):
    assert await SchemaManager(database.engine).create_all()
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture
async def populated(session):
    """Bob, Fred, Harry and Rick; chat 1 owned by Bob, chat 2 owned by Harry."""
    users = UserRepository(session)
    for name in ("Bob", "Fred", "Harry", "Rick"):
        assert await users.add_user(name, f"{name.lower()}-pass")

    chats = ChatRepository(session)
    assert await chats.add_chat(1, "Bob", ["Bob", "Fred", "Harry"])
    assert await chats.add_chat(2, "Harry", ["Fred", "Harry"])
    return session


@pytest_asyncio.fixture
async def bare_session(database):
    """Session on a store that has no tables, so every statement fails."""
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture
async def unreachable(tmp_path):
    # A directory cannot be opened as an SQLite file
    db = Database(f"sqlite+aiosqlite:///{tmp_path}", echo=False)
    yield db
    await db.close()
