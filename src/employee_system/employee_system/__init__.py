"""Employee System package.

Organized by feature modules (auth, employees, tasks, dashboards) with a thin
Flask controller layer over service/repository layers. All data lives in a
hosted Supabase project reached through the remote store gateway.
"""
