from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, abort, current_app, flash, redirect, render_template, request, send_file, url_for

from ..container import Container
from ..core.constants import EXPORT_MIMETYPE
from ..core.exceptions import DomainError
from ..views.forms import FormModal
from ..views.listing import ListFilters, ListPage

logger = logging.getLogger(__name__)

_FLASH_CATEGORY = {"error": "danger", "success": "success", "warning": "warning"}


def register(app: Flask, container: Container) -> None:
    def page_required(view):
        @wraps(view)
        def wrapper(key, *args, **kwargs):
            page = container.page(key)
            if page is None:
                abort(404)
            return view(page, *args, **kwargs)

        return wrapper

    def _flash_all(notifications) -> None:
        for n in notifications:
            flash(n.message, _FLASH_CATEGORY.get(n.level, "info"))

    def _modal(page: ListPage) -> FormModal:
        employees = container.employees.get_all() if page.needs_employees else []
        return FormModal(page.form, container.service_for(page), employees=employees)

    def _back(page: ListPage):
        return redirect(url_for("records_list", key=page.key))

    def _render_form(page: ListPage, modal: FormModal):
        return render_template(
            "records/form.html",
            page=page,
            pages=container.pages,
            modal=modal,
            employee_options=[(str(e.id), e.full_name) for e in modal.employees],
            active_page=page.key,
        )

    def _submit(page: ListPage, modal: FormModal):
        modal.fill(request.form)
        result = modal.submit()
        _flash_all(modal.notifications)
        if result is not None:
            return _back(page)
        return _render_form(page, modal)

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return redirect(url_for("records_list", key=container.pages[0].key))

    @app.route("/<key>", methods=["GET"], endpoint="records_list")
    @page_required
    def records_list(page: ListPage):
        view = container.list_view(page)
        view.load()
        if view.error:
            flash(view.error, "danger")
        filters = ListFilters.from_args(page, request.args)
        records = view.apply(filters)
        return render_template(
            "records/list.html",
            page=page,
            pages=container.pages,
            view=view,
            filters=filters,
            records=records,
            rows=view.rows(records),
            counts=view.counts() if page.stats_attr else {},
            breakdowns=view.breakdowns(),
            active_page=page.key,
        )

    @app.route("/<key>/export", methods=["GET"], endpoint="records_export")
    @page_required
    def records_export(page: ListPage):
        view = container.list_view(page)
        if not view.load():
            flash(view.error, "danger")
            return _back(page)
        try:
            out = view.export(view.apply(ListFilters.from_args(page, request.args)))
        except Exception as e:
            logger.exception("Export of %s failed", page.key)
            flash(f"Export failed: {e}", "danger")
            return _back(page)
        return send_file(out, mimetype=EXPORT_MIMETYPE, as_attachment=True, download_name=f"{page.key}.xlsx")

    @app.route("/<key>/new", methods=["GET", "POST"], endpoint="records_new")
    @page_required
    def records_new(page: ListPage):
        modal = _modal(page)
        modal.open_create()
        if request.method == "POST":
            return _submit(page, modal)
        return _render_form(page, modal)

    @app.route("/<key>/<int:record_id>/edit", methods=["GET", "POST"], endpoint="records_edit")
    @page_required
    def records_edit(page: ListPage, record_id: int):
        record = container.service_for(page).get_by_id(record_id)
        if record is None:
            flash(f"{page.form.entity_label.capitalize()} not found", "warning")
            return _back(page)
        modal = _modal(page)
        modal.open_edit(record)
        if request.method == "POST":
            return _submit(page, modal)
        return _render_form(page, modal)

    @app.route("/<key>/<int:record_id>", methods=["GET"], endpoint="records_view")
    @page_required
    def records_view(page: ListPage, record_id: int):
        if not page.form.supports_view:
            return redirect(url_for("records_edit", key=page.key, record_id=record_id))
        record = container.service_for(page).get_by_id(record_id)
        if record is None:
            flash(f"{page.form.entity_label.capitalize()} not found", "warning")
            return _back(page)
        modal = _modal(page)
        modal.open_view(record)
        return _render_form(page, modal)

    @app.route("/<key>/<int:record_id>/delete", methods=["GET", "POST"], endpoint="records_delete")
    @page_required
    def records_delete(page: ListPage, record_id: int):
        label = page.form.entity_label
        if request.method == "GET":
            return render_template(
                "records/confirm.html",
                page=page,
                pages=container.pages,
                message=f"Are you sure you want to delete this {label}?",
                action=url_for("records_delete", key=page.key, record_id=record_id),
                active_page=page.key,
            )
        if request.form.get("confirm") != "yes":
            return _back(page)
        view = container.list_view(page)
        try:
            if view.delete(record_id, confirmed=True):
                flash(f"{label.capitalize()} deleted successfully", "success")
            else:
                flash(f"Failed to delete {label}", "danger")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Deleting %s %s failed", page.key, record_id)
            flash(f"System error while deleting {label}", "danger")
        return _back(page)

    def _leave_view():
        page = container.page("leave-requests")
        view = container.list_view(page)
        view.load()
        return page, view

    @app.route("/leave-requests/<int:record_id>/approve", methods=["POST"], endpoint="leave_approve")
    def leave_approve(record_id: int):
        page, view = _leave_view()
        try:
            if view.approve(record_id, current_app.config["APPROVER_NAME"]):
                flash("Leave request approved", "success")
            else:
                flash("Failed to approve leave request", "danger")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Approving leave request %s failed", record_id)
            flash("System error while approving leave request", "danger")
        return _back(page)

    @app.route("/leave-requests/<int:record_id>/reject", methods=["GET", "POST"], endpoint="leave_reject")
    def leave_reject(record_id: int):
        page = container.page("leave-requests")
        if request.method == "GET":
            return render_template(
                "records/confirm.html",
                page=page,
                pages=container.pages,
                message="Are you sure you want to reject this leave request?",
                action=url_for("leave_reject", record_id=record_id),
                active_page=page.key,
            )
        page, view = _leave_view()
        try:
            confirmed = request.form.get("confirm") == "yes"
            if view.reject(record_id, current_app.config["APPROVER_NAME"], confirmed=confirmed):
                flash("Leave request rejected", "success")
            elif confirmed:
                flash("Failed to reject leave request", "danger")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Rejecting leave request %s failed", record_id)
            flash("System error while rejecting leave request", "danger")
        return _back(page)
