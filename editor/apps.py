from django.apps import AppConfig


class EditorConfig(AppConfig):
    name = 'editor'

    def ready(self):
        """Build the shared markdown configuration once, at startup."""
        from editor.markdown import warm_pipeline

        warm_pipeline()
