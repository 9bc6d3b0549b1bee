"""HTTP routers for the Todo List API."""
