from abc import ABC
from typing import Generator, Generic, Iterator, TypeVar
import inspect
from .common import instantiate, logger


InputType = TypeVar("InputType")
OutputType = TypeVar("OutputType")

class PipelineElement(ABC, Generic[InputType, OutputType]):
    def __init__(self):
        """Capture the calling subclass constructor's arguments as defaults"""
        self._defaults = {}

        frame = inspect.currentframe().f_back
        if frame:
            _, _, _, values = inspect.getargvalues(frame)
            self._defaults = {k: v for k, v in values.items() if k != 'self' and not k.startswith('__')}

    def apply_defaults(self, dataclass_instance):
        """Fill the None fields of a per-item input with the constructor defaults"""
        for field_name, default_value in self._defaults.items():
            if hasattr(dataclass_instance, field_name) and getattr(dataclass_instance, field_name) is None:
                setattr(dataclass_instance, field_name, default_value)
        return dataclass_instance

    def configure(self, **kwargs):
        """Override constructor defaults after the element was created"""
        self._defaults.update(kwargs)
        return self

    def process(self, input: Iterator[InputType]) -> Generator[OutputType, None, None]:
        logger().error(f"process method not implemented on {type(self).__name__}")
        raise NotImplementedError

    @staticmethod
    def create(**kwargs):
        element_id = kwargs.pop("id", None)
        if element_id is None:
            raise ValueError("Pipeline element definition is missing 'id'")
        return instantiate(element_id, **kwargs)
