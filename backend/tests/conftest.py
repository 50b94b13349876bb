"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from access_audit.core.config import AuditSettings, Settings, get_settings
from access_audit.database import get_db
from access_audit.main import app
from access_audit.models.group import Group
from access_audit.models.permission import Permission
from access_audit.models.role import Role
from access_audit.models.role_permission import RolePermission
from access_audit.models.user import User
from access_audit.models.user_role import UserRole


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Test settings with a per-test SQLite database."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        debug=True,
    )


@pytest.fixture
def audit_settings() -> AuditSettings:
    """Audit paging settings with the production defaults."""
    return AuditSettings(default_page_size=100, max_page_size=1000)


@pytest.fixture
async def test_engine(test_settings: Settings, request):
    """
    Create test database engine with all tables.

    SQLite leaves foreign keys unenforced unless a test is marked
    @pytest.mark.foreign_keys.
    """
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        future=True,
    )

    if request.node.get_closest_marker("foreign_keys") is not None:

        @event.listens_for(engine.sync_engine, "connect")
        def enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    # Import all models explicitly to ensure they're registered with SQLModel.metadata
    from access_audit.models import ALL_TABLE_MODELS  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for each test."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client for testing."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# ============================================================================
# RBAC seeding
# ============================================================================


class RbacFactory:
    """Builds users, groups, roles, permissions and their links in the test DB."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self._counter = 0

    async def _save(self, obj):
        self.session.add(obj)
        await self.session.commit()
        await self.session.refresh(obj)
        return obj

    async def user(self, email: str | None = None) -> User:
        self._counter += 1
        email = email or f"user{self._counter}@example.com"
        return await self._save(User(email=email, display_name=email.split("@")[0]))

    async def group(self, name: str = "Default") -> Group:
        return await self._save(Group(name=name))

    async def permission(self, resource: str, action: str, name: str | None = None) -> Permission:
        return await self._save(
            Permission(name=name or f"{resource}:{action}", resource=resource, action=action)
        )

    async def role(self, name: str, *permissions: Permission, group: Group | None = None) -> Role:
        group = group or await self.group()
        role = await self._save(Role(name=name, group_id=group.id))
        for permission in permissions:
            await self.grant(role, permission)
        return role

    async def grant(self, role: Role, permission: Permission) -> RolePermission:
        return await self._save(RolePermission(role_id=role.id, permission_id=permission.id))

    async def assign(self, user: User, role: Role) -> UserRole:
        return await self._save(UserRole(user_id=user.id, role_id=role.id))

    async def soft_delete(self, obj):
        obj.soft_delete()
        return await self._save(obj)


@pytest.fixture
def rbac(db_session: AsyncSession) -> RbacFactory:
    """RBAC seeding helper bound to the test session."""
    return RbacFactory(db_session)


@pytest.fixture
def actor_header() -> str:
    """Name of the header carrying the authenticated actor id."""
    return get_settings().actor_header


@pytest.fixture
async def auditor_headers(rbac: RbacFactory, actor_header: str) -> dict[str, str]:
    """Headers for an actor holding audit_logs:read."""
    user = await rbac.user("auditor@example.com")
    read_logs = await rbac.permission("audit_logs", "read")
    role = await rbac.role("Auditor", read_logs)
    await rbac.assign(user, role)
    return {actor_header: user.id}


# ============================================================================
# In-memory fakes of the store protocols
# ============================================================================


def make_permission(resource: str, action: str, id: str | None = None) -> Permission:
    """Unsaved Permission instance for unit tests."""
    permission = Permission(name=f"{resource}:{action}", resource=resource, action=action)
    if id is not None:
        permission.id = id
    return permission


class FakePermissionDataSource:
    """PermissionDataSource returning canned rows and recording every call."""

    def __init__(
        self,
        grants: dict[str, list[Permission]] | None = None,
        error: Exception | None = None,
    ):
        self.grants = grants or {}
        self.error = error
        self.calls: list[str] = []

    async def get_user_permissions(self, user_id: str) -> list[Permission]:
        self.calls.append(user_id)
        if self.error is not None:
            raise self.error
        return list(self.grants.get(user_id, []))



@pytest.fixture
def permission_factory():
    """Builds unsaved Permission rows: permission_factory("users", "read", id="p1")."""
    return make_permission


@pytest.fixture
def permission_source_factory():
    """Builds in-memory PermissionDataSource fakes from grants or an error."""
    return FakePermissionDataSource
