# brokeuni_travel/routes/__init__.py
NAMESPACE = "/planner/ws"
