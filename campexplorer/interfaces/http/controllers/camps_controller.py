# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from campexplorer.application.services.camp_service import CampService, parse_price
from campexplorer.domain.accounts.repositories import AccountRepository, TokenValidator
from campexplorer.domain.camps.entities import CampChanges, CampImage
from campexplorer.infrastructure.audit import AuditAction, audit_log
from campexplorer.interfaces.http.auth import auth_required
from campexplorer.interfaces.http.dto.camps import CampDTO, CampFormDTO
from campexplorer.shared.errors.validation import raise_validation_error


def _read_form() -> CampFormDTO:
    if request.is_json:
        payload = request.get_json(silent=True) or {}
    else:
        payload = request.form.to_dict()
    try:
        return CampFormDTO.model_validate(payload)
    except ValidationError as exc:
        raise_validation_error(exc)


def _read_image() -> CampImage | None:
    upload = request.files.get("image")
    if upload is None or not upload.filename:
        return None
    return CampImage(
        data=upload.read(),
        content_type=upload.mimetype or "application/octet-stream",
        filename=upload.filename,
    )


def _safe_filename(name: str | None) -> str:
    return (name or "image").replace('"', "").replace("\r", "").replace("\n", "")


class CampsController:
    def __init__(
        self,
        *,
        camp_service: CampService,
        token_validator: TokenValidator,
        accounts: AccountRepository | None = None,
        protect_writes: bool = True,
    ) -> None:
        self._camp_service = camp_service
        self._token_validator = token_validator
        self._accounts = accounts
        self._protect_writes = protect_writes

    def list_camps(self) -> tuple[Response, int]:
        camps = self._camp_service.list_camps()
        return jsonify([CampDTO.from_entity(camp).to_json() for camp in camps]), 200

    def get(self, camp_id: str) -> tuple[Response, int]:
        camp = self._camp_service.get_camp(camp_id)
        return jsonify(CampDTO.from_entity(camp).to_json()), 200

    def image(self, camp_id: str) -> Response:
        image = self._camp_service.get_camp_image(camp_id)
        response = Response(
            image.data,
            status=200,
            mimetype=image.content_type or "application/octet-stream",
        )
        response.headers["Content-Disposition"] = (
            f'inline; filename="{_safe_filename(image.filename)}"'
        )
        return response

    def create(self) -> tuple[Response, int]:
        form = _read_form()
        camp = self._camp_service.create_camp(
            title=form.title,
            location=form.location,
            description=form.description,
            price=form.price,
            image=_read_image(),
        )
        audit_log(
            AuditAction.CAMP_CREATED,
            account_id=getattr(g, "account_id", None),
            ip_address=request.remote_addr,
            details={"camp_id": camp.id},
        )
        payload = {
            "success": True,
            "data": CampDTO.from_entity(camp).to_json(),
            "message": "Camp created successfully",
        }
        return jsonify(payload), 201

    def update(self, camp_id: str) -> tuple[Response, int]:
        form = _read_form()
        changes = CampChanges(
            title=form.title,
            location=form.location,
            description=form.description,
            price=parse_price(form.price),
        )
        camp = self._camp_service.update_camp(camp_id, changes, _read_image())
        audit_log(
            AuditAction.CAMP_UPDATED,
            account_id=getattr(g, "account_id", None),
            ip_address=request.remote_addr,
            details={"camp_id": camp_id, "fields": sorted(changes.as_dict())},
        )
        return jsonify(CampDTO.from_entity(camp).to_json()), 200

    def delete(self, camp_id: str) -> tuple[Response, int]:
        self._camp_service.delete_camp(camp_id)
        audit_log(
            AuditAction.CAMP_DELETED,
            account_id=getattr(g, "account_id", None),
            ip_address=request.remote_addr,
            details={"camp_id": camp_id},
        )
        return jsonify({"message": "Camp deleted successfully"}), 200

    def as_blueprint(self) -> Blueprint:
        if self._protect_writes:
            guard = auth_required(self._token_validator, self._accounts)
        else:
            def guard(f):
                return f

        bp = Blueprint("camps", __name__, url_prefix="/api/camps")
        bp.add_url_rule("", endpoint="list", view_func=self.list_camps, methods=["GET"])
        bp.add_url_rule("", endpoint="create", view_func=guard(self.create), methods=["POST"])
        bp.add_url_rule("/<camp_id>", endpoint="get", view_func=self.get, methods=["GET"])
        bp.add_url_rule(
            "/<camp_id>", endpoint="update", view_func=guard(self.update), methods=["PUT"]
        )
        bp.add_url_rule(
            "/<camp_id>", endpoint="delete", view_func=guard(self.delete), methods=["DELETE"]
        )
        bp.add_url_rule(
            "/<camp_id>/image", endpoint="image", view_func=self.image, methods=["GET"]
        )
        return bp
