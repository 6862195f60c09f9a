from __future__ import annotations

from flask import Flask, flash, g, redirect, render_template, request, url_for

from ..auth.guards import login_required, manager_required, single_submit
from ..auth.resolver import ManagerView
from ..container import Container
from ..core.enums import EmployeeStatus, Role, TaskStatus
from ..employees.model import EmployeeForm
from ..tasks.model import TaskForm
from .employee import EmployeeDashboard
from .manager import ManagerDashboard


def register(app: Flask, container: Container) -> None:
    def _manager_board() -> ManagerDashboard:
        view = g.resolver.view
        return ManagerDashboard(
            g.services.employee_service,
            g.services.task_service,
            current_role=view.profile.role,
        ).load()

    def _employee_board() -> EmployeeDashboard:
        return EmployeeDashboard(
            g.resolver.session.email,
            g.services.employee_service,
            g.services.task_service,
        ).load()

    def _render_manager(board: ManagerDashboard, status: int = 200):
        return (
            render_template(
                "manager/dashboard.html",
                board=board,
                roles=list(Role),
                employee_statuses=list(EmployeeStatus),
                task_statuses=list(TaskStatus),
            ),
            status,
        )

    def _render_employee(board: EmployeeDashboard, status: int = 200):
        return render_template("employee/dashboard.html", board=board, task_statuses=list(TaskStatus)), status

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        if not isinstance(g.resolver.view, ManagerView):
            return _render_employee(_employee_board())

        board = _manager_board()

        employee_arg = request.args.get("employee")
        if employee_arg == "new":
            board.start_create_employee()
        elif employee_arg:
            board.start_edit_employee(employee_arg)

        task_arg = request.args.get("task")
        if task_arg == "new":
            board.start_create_task()
        elif task_arg:
            board.start_edit_task(task_arg)

        return _render_manager(board)

    @app.route("/employees/save", methods=["POST"], endpoint="save_employee")
    @manager_required
    @single_submit
    def save_employee():
        board = _manager_board()
        if board.save_employee(EmployeeForm.from_mapping(request.form)):
            flash("Employee saved.", "success")
            return redirect(url_for("dashboard"))
        return _render_manager(board)

    @app.route("/tasks/save", methods=["POST"], endpoint="save_task")
    @manager_required
    @single_submit
    def save_task():
        board = _manager_board()
        if board.save_task(TaskForm.from_mapping(request.form)):
            flash("Task saved.", "success")
            return redirect(url_for("dashboard"))
        return _render_manager(board)

    @app.route("/tasks/<task_id>/delete", methods=["GET"], endpoint="confirm_delete_task")
    @manager_required
    def confirm_delete_task(task_id: str):
        board = _manager_board()
        task = board.find_task(task_id)
        if task is None:
            flash("That task no longer exists.", "warning")
            return redirect(url_for("dashboard"))
        return render_template("manager/confirm_delete.html", task=task)

    @app.route("/tasks/<task_id>/delete", methods=["POST"], endpoint="delete_task")
    @manager_required
    @single_submit
    def delete_task(task_id: str):
        confirmed = request.form.get("confirm") == "yes"
        if not confirmed:
            return redirect(url_for("dashboard"))

        board = _manager_board()
        if board.delete_task(task_id, confirmed=True):
            flash("Task deleted.", "success")
            return redirect(url_for("dashboard"))
        return _render_manager(board)

    @app.route("/my/tasks/<task_id>/status", methods=["POST"], endpoint="change_task_status")
    @login_required
    @single_submit
    def change_task_status(task_id: str):
        board = _employee_board()
        if board.change_status(task_id, request.form.get("status", "")):
            return redirect(url_for("dashboard"))
        return _render_employee(board)
