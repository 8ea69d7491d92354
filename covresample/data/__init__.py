from .dataset import ClassAttribute, Instance, Dataset

__all__ = ["ClassAttribute", "Instance", "Dataset"]
