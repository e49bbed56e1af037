from .upload_controller import UploadController


__all__ = ["UploadController"]
