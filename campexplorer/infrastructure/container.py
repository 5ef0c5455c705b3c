# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from functools import cached_property

from sqlalchemy.orm import Session

from campexplorer.application.services.auth_service import AuthService
from campexplorer.application.services.camp_service import CampService
from campexplorer.application.services.password_hashing import WerkzeugPasswordHasher
from campexplorer.application.services.tokens import JwtTokenIssuer, JwtTokenValidator
from campexplorer.infrastructure.repositories.accounts import SqlAlchemyAccountRepository
from campexplorer.infrastructure.repositories.camps import SqlAlchemyCampRepository
from campexplorer.interfaces.http.controllers.auth_controller import AuthController
from campexplorer.interfaces.http.controllers.camps_controller import CampsController
from campexplorer.interfaces.http.controllers.misc_controller import MiscController
from campexplorer.shared.config import AppConfig, load_config


class Container:
    def __init__(
        self,
        *,
        config: AppConfig | None = None,
        session_factory: Callable[[], Session] | None = None,
    ) -> None:
        self._config = config
        self._session_factory = session_factory

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    @property
    def uses_default_database(self) -> bool:
        return self._session_factory is None

    @cached_property
    def session_factory(self) -> Callable[[], Session]:
        if self._session_factory is not None:
            return self._session_factory
        from campexplorer.infrastructure.db import SessionLocal

        return SessionLocal

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.security.password_hash_method)

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(
            secret=self.config.tokens.secret,
            lifetime=timedelta(seconds=self.config.tokens.lifetime_seconds),
            algorithm=self.config.tokens.algorithm,
        )

    @cached_property
    def token_validator(self) -> JwtTokenValidator:
        return JwtTokenValidator(
            secret=self.config.tokens.secret,
            algorithm=self.config.tokens.algorithm,
        )

    @cached_property
    def account_repository(self) -> SqlAlchemyAccountRepository:
        return SqlAlchemyAccountRepository(self.session_factory)

    @cached_property
    def camp_repository(self) -> SqlAlchemyCampRepository:
        return SqlAlchemyCampRepository(self.session_factory)

    @cached_property
    def auth_service(self) -> AuthService:
        return AuthService(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
            token_issuer=self.token_issuer,
        )

    @cached_property
    def camp_service(self) -> CampService:
        return CampService(camps=self.camp_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(auth_service=self.auth_service)

    @cached_property
    def camps_controller(self) -> CampsController:
        return CampsController(
            camp_service=self.camp_service,
            token_validator=self.token_validator,
            accounts=self.account_repository,
            protect_writes=self.config.security.protect_camp_writes,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(config=self.config, session_factory=self.session_factory)


container = Container()
