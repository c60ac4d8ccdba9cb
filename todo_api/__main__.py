from todo_api.server import run

run()
