from todo_sync.composition_root.container import AppContainer, create_app_container

__all__ = ["AppContainer", "create_app_container"]
