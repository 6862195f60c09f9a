"""Remote table names, column lists and defaults.

Note: Keep the wire contract here so repositories do not spell table names inline.
"""

PROFILES_TABLE = "profiles"
EMPLOYEES_TABLE = "employees"
TASKS_TABLE = "tasks"

PROFILE_COLUMNS = "id, full_name, role"
EMPLOYEE_COLUMNS = "id, full_name, email, role, status"
TASK_COLUMNS = "id, title, description, status, due_date, employee_email, created_at, completed_at"

DEFAULT_SESSION_DAYS = 7
MAX_PENDING_FORM_TOKENS = 20
