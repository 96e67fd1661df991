import inspect
import os
import time
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, Generator, Iterator, List, Mapping, Optional, TypeVar, get_type_hints

from .common import MalformedPipelineElement, instantiate, loadjson, loadyaml, logger
from .pipelineElement import InputType, OutputType, PipelineElement


@dataclass
class ElementMetrics:
    element_id: str
    start_time: Optional[float] = None
    end_time: Optional[float] = None
    items_processed: int = 0
    status: str = "pending"  # pending, running, completed, failed

    @property
    def duration(self) -> float:
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time is not None else time.time()
        return end - self.start_time


@dataclass
class PipelineStats:
    start_time: Optional[float] = None
    end_time: Optional[float] = None
    element_metrics: List[ElementMetrics] = field(default_factory=list)
    total_items_processed: int = 0

    @property
    def duration(self) -> float:
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time is not None else time.time()
        return end - self.start_time


class Pipeline(PipelineElement):
    def __init__(self, elements: List[dict], stop_on_error: bool = True):
        self.elements: List[PipelineElement] = []
        self.stop_on_error = stop_on_error
        self.stats: Optional[PipelineStats] = None

        logger().push()
        try:
            for e in elements:
                if not isinstance(e, dict) or "id" not in e:
                    raise MalformedPipelineElement(f"Pipeline elements need an 'id', got {e!r}")
                logger().debug(f"Creating element {e['id']}")
                self.elements.append(PipelineElement.create(**e))
        except Exception as ex:
            logger().error(f"Error creating pipeline element: {ex}")
            raise
        finally:
            logger().pop()

    @staticmethod
    def _get_dict(obj) -> Dict[str, Any]:
        """Field values of an item; simple values are wrapped as `input`"""
        if isinstance(obj, dict):
            return obj
        if isinstance(obj, tuple):
            return {f"_{i}": v for i, v in enumerate(obj)}
        if hasattr(obj, "__dict__"):
            return obj.__dict__
        return {"input": obj}

    @staticmethod
    def _get_id(obj) -> str:
        klass = type(obj)
        return f"{klass.__module__}.{klass.__qualname__}"

    @staticmethod
    def _input_type(element: PipelineElement):
        """The item type of an element's `process(input: Iterator[X])` argument"""
        hints = get_type_hints(element.process)
        if "input" not in hints:
            raise AttributeError(f"Element of type {element.__class__} does not have an 'input' parameter. Signature is {inspect.signature(element.process)}")
        args = getattr(hints["input"], "__args__", None)
        return args[0] if args else Any

    def _flatten(self, iterable):
        for item in iterable:
            if isinstance(item, list):
                yield from self._flatten(item)
            else:
                yield item

    def _convert_item_to_type(self, item, target_type):
        """Convert a single item to the target type"""
        if target_type is Any or isinstance(target_type, TypeVar):
            return item
        if isinstance(target_type, type) and isinstance(item, target_type):
            return item

        if not is_dataclass(target_type):
            return instantiate(f"{target_type.__module__}.{target_type.__qualname__}", **self._get_dict(item))

        # Only pass fields that exist in the dataclass
        valid_fields = {f.name for f in fields(target_type)}
        filtered_data = {k: v for k, v in self._get_dict(item).items() if k in valid_fields}

        # Nothing matched: hand over the whole item as 'input'
        if not filtered_data and "input" in valid_fields:
            filtered_data = {"input": item}

        logger().debug(f"Converted {type(item).__name__} to {target_type.__name__} with fields {sorted(filtered_data)}")
        return target_type(**filtered_data)

    def _tracked_generator(self, generator, metrics: ElementMetrics):
        """Wrap a generator to track item flow and update metrics"""
        metrics.start_time = time.time()
        metrics.status = "running"
        try:
            for item in generator:
                metrics.items_processed += 1
                yield item
        except Exception:
            metrics.status = "failed"
            metrics.end_time = time.time()
            logger().info(f"Failed after {metrics.items_processed} items ({metrics.duration:.1f}s)")
            raise
        metrics.status = "completed"
        metrics.end_time = time.time()
        logger().debug(f"Completed {metrics.element_id} ({metrics.items_processed} items, {metrics.duration:.1f}s)")

    def _log_pipeline_summary(self):
        """Log the per-element breakdown as an ASCII table"""
        if not self.stats:
            return

        self.stats.end_time = time.time()
        logger().info("═══ Pipeline Summary ═══")
        logger().info(f"Total elements: {len(self.stats.element_metrics)}")
        logger().info(f"Total execution time: {self.stats.duration:.1f}s")
        logger().info(f"Total items processed: {self.stats.total_items_processed}")

        table_data = []
        # Generators start downstream first, so metrics were recorded last-to-first
        for i, metrics in enumerate(reversed(self.stats.element_metrics), 1):
            element_name = metrics.element_id.split('.')[-1]
            table_data.append((i, element_name, metrics.items_processed, f"{metrics.duration:.1f}s", metrics.status))
        if not table_data:
            return

        max_name_width = max(len(row[1]) for row in table_data)
        max_items_width = max(max(len(str(row[2])) for row in table_data), len("Items"))
        max_time_width = max(max(len(row[3]) for row in table_data), len("Time"))

        logger().info(f"  {'#':2} {'Element':<{max_name_width}} {'Items':>{max_items_width}} {'Time':>{max_time_width}} Status")
        logger().info(f"  {'-'*2} {'-'*max_name_width} {'-'*max_items_width} {'-'*max_time_width} {'-'*6}")
        for num, name, items, duration_str, status in table_data:
            logger().info(f"  {num:2} {name:<{max_name_width}} {items:>{max_items_width}} {duration_str:>{max_time_width}} {status}")

    def _element_generator(self, element: PipelineElement, input_stream, index: int):
        """Lazily run one element over the converted output of the previous one"""
        element_name = element.__class__.__name__
        metrics = ElementMetrics(element_id=self._get_id(element))
        self.stats.element_metrics.append(metrics)
        arg_type = self._input_type(element)

        def convert_items_generator():
            for item in self._flatten(input_stream):
                try:
                    yield self._convert_item_to_type(item, arg_type)
                except Exception as item_ex:
                    logger().error(f"Error converting item for {element_name}: {item_ex}")
                    if self.stop_on_error:
                        raise
                    # Skip this item and continue with next

        try:
            yield from self._tracked_generator(element.process(convert_items_generator()), metrics)
        except Exception as ex:
            if metrics.end_time is None:
                metrics.status = "failed"
                metrics.end_time = time.time()
            logger().error(f"Error in element {index}/{len(self.elements)} {element_name}: {ex}")
            if self.stop_on_error:
                raise
            logger().warning(f"Continuing pipeline despite error in element {element_name}")

    def process(self, input: Iterator[InputType]) -> Generator[OutputType, None, None]:
        self.stats = PipelineStats(start_time=time.time())
        logger().info(f"Pipeline started ({len(self.elements)} elements configured)")

        logger().push()
        for i, element in enumerate(self.elements, 1):
            logger().info(f"→ Element {i}/{len(self.elements)}: {element.__class__.__name__}")

        current_stream = input
        for i, element in enumerate(self.elements, 1):
            current_stream = self._element_generator(element, current_stream, i)

        try:
            for item in current_stream:
                self.stats.total_items_processed += 1
                yield item
        finally:
            logger().pop()
            self._log_pipeline_summary()

    def run(self, input: Optional[dict] = None) -> Any:
        """Push a single item through the pipeline and return the last output"""
        output = None
        for output in self.process([input if input is not None else {}]):
            pass
        return output

    def __getitem__(self, key):
        return self.elements[key]

    def __len__(self):
        return len(self.elements)

    @staticmethod
    def from_config(pipeline_filename: str, expand_env: bool = False, variables: Optional[Mapping[str, str]] = None, stop_on_error: bool = True) -> 'Pipeline':
        """Build a pipeline from a YAML or JSON list of element definitions"""
        ext = os.path.splitext(pipeline_filename)[1]
        if ext == ".json":
            pipeline_data = loadjson(pipeline_filename, expand_env, variables)
        elif ext in (".yaml", ".yml"):
            pipeline_data = loadyaml(pipeline_filename, expand_env, variables)
        else:
            raise ValueError(f"Unsupported pipeline file type '{ext}' for {pipeline_filename}")

        if not isinstance(pipeline_data, list):
            raise MalformedPipelineElement(f"{pipeline_filename} must contain a list of elements")
        return Pipeline(pipeline_data, stop_on_error=stop_on_error)
