from todo_sync.main import run

run()
