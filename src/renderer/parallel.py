# renderer/parallel.py
"""
Multi-worker rendering.

Every worker renders the whole image with its share of the samples per
pixel, and the partial images are averaged once all workers have joined.
Workers share the scene and camera read-only and each owns an independently
seeded random generator, so no locking is needed. Progress flows back to
the calling thread through a queue that it polls while waiting.
"""
import enum
import logging
import multiprocessing
import queue
import random
import time
from concurrent.futures import (FIRST_COMPLETED, Executor, ProcessPoolExecutor,
                                ThreadPoolExecutor, wait)
from contextlib import ExitStack
from typing import Callable, List, Optional, Sequence

import numpy as np

from camera.camera import Camera
from geometry.hittable import Hittable
from renderer.config import RenderConfig
from renderer.progress import format_rough_duration
from renderer.raytracer import Renderer

logger = logging.getLogger(__name__)

# Seconds the main thread waits on workers between progress polls
POLL_INTERVAL = 0.1

ProgressCallback = Callable[[int, float], None]


class RenderError(RuntimeError):
    """A render worker failed; the render produced no image."""


class RenderState(enum.Enum):
    IDLE = 0
    DISPATCHED = 1
    RENDERING = 2
    JOINED = 3
    AVERAGED = 4
    DONE = 5


def split_samples(total: int, workers: int) -> List[int]:
    """
    Divides total samples between workers. The first total % workers
    workers take one extra sample so the shares always add up to total.
    """
    if workers < 1:
        raise ValueError(f"At least one worker is required, got {workers}")
    share, remainder = divmod(total, workers)
    return [share + 1 if i < remainder else share for i in range(workers)]


def active_shares(config: RenderConfig) -> List[int]:
    """Sample shares of the workers that actually render; zero shares are never dispatched."""
    return [s for s in split_samples(config.samples_per_pixel, config.workers) if s > 0]


def worker_seeds(seed: Optional[int], workers: int) -> List[int]:
    """Independent per-worker seeds derived from one (possibly random) root seed."""
    children = np.random.SeedSequence(seed).spawn(workers)
    return [int(child.generate_state(1)[0]) for child in children]


def average_images(images: Sequence[np.ndarray], weights: Optional[Sequence[float]] = None) -> np.ndarray:
    """
    Element-wise mean of equally shaped images, optionally weighted.
    """
    if len(images) == 0:
        raise ValueError("Cannot average an empty list of images")
    shape = images[0].shape
    for image in images[1:]:
        if image.shape != shape:
            raise ValueError(f"Image shapes must match: {shape} vs {image.shape}")
    if weights is not None:
        if len(weights) != len(images):
            raise ValueError(f"Expected {len(images)} weights, got {len(weights)}")
        if sum(weights) <= 0:
            raise ValueError("Weights must have a positive sum")
    return np.average(np.stack(images), axis=0, weights=weights)


def render_worker(worker_id: int, scene: Hittable, camera: Camera, config: RenderConfig,
                  samples: int, seed: int, progress_queue) -> np.ndarray:
    """Renders one partial image, reporting (worker_id, fraction) on progress_queue."""
    renderer = Renderer(config.width, config.height, samples,
                        max_depth=config.max_depth, jitter=config.jitter)
    rng = random.Random(seed)

    def report(fraction: float):
        progress_queue.put((worker_id, fraction))

    return renderer.render_image(camera, scene, rng, report)


class ParallelRenderer:
    """
    One render of a scene split across a fixed pool of workers.

    Moves through IDLE, DISPATCHED, RENDERING, JOINED, AVERAGED and DONE in
    order. A failed worker aborts the whole render with RenderError. There
    is no cancellation; render() returns only when every worker has finished.
    """

    def __init__(self, scene: Hittable, camera: Camera, config: RenderConfig,
                 on_progress: Optional[ProgressCallback] = None):
        self.scene = scene
        self.camera = camera
        self.config = config.validate()
        self.on_progress = on_progress
        self.state = RenderState.IDLE
        self.elapsed = 0.0

    def _advance(self, state: RenderState):
        if state.value != self.state.value + 1:
            raise RuntimeError(f"Cannot move from {self.state.name} to {state.name}")
        logger.debug("Render state %s -> %s", self.state.name, state.name)
        self.state = state

    def _executor(self, workers: int) -> Executor:
        if self.config.use_processes:
            return ProcessPoolExecutor(max_workers=workers)
        return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="render-worker")

    def _drain(self, progress_queue):
        while True:
            try:
                worker_id, fraction = progress_queue.get_nowait()
            except queue.Empty:
                return
            if self.on_progress is not None:
                self.on_progress(worker_id, fraction)

    def render(self) -> np.ndarray:
        """
        Renders the scene and returns the averaged linear image, shape (height, width, 3).
        """
        if self.state is not RenderState.IDLE:
            raise RuntimeError("A ParallelRenderer can only render once")

        config = self.config
        shares = active_shares(config)
        seeds = worker_seeds(config.seed, len(shares))
        start = time.monotonic()

        logger.info("Rendering %dx%d with %d samples on %d %s to trace %d rays",
                    config.width, config.height, config.samples_per_pixel, len(shares),
                    "processes" if config.use_processes else "threads", config.rays_to_trace)

        with ExitStack() as stack:
            if config.use_processes:
                manager = stack.enter_context(multiprocessing.Manager())
                progress_queue = manager.Queue()
            else:
                progress_queue = queue.Queue()
            executor = stack.enter_context(self._executor(len(shares)))

            futures = []
            for worker_id, (samples, seed) in enumerate(zip(shares, seeds)):
                logger.debug("Worker %d: %d samples per pixel", worker_id, samples)
                futures.append(executor.submit(render_worker, worker_id, self.scene, self.camera,
                                               config, samples, seed, progress_queue))
            self._advance(RenderState.DISPATCHED)

            self._advance(RenderState.RENDERING)
            pending = set(futures)
            while pending:
                _, pending = wait(pending, timeout=POLL_INTERVAL, return_when=FIRST_COMPLETED)
                self._drain(progress_queue)
            self._drain(progress_queue)

            images = []
            for worker_id, future in enumerate(futures):
                try:
                    images.append(future.result())
                except Exception as exc:
                    raise RenderError(f"Render worker {worker_id} failed: {exc}") from exc
        self._advance(RenderState.JOINED)

        image = average_images(images, weights=shares)
        if not np.isfinite(image).all():
            logger.warning("Averaged image contains non-finite values, replacing with black")
            image = np.nan_to_num(image, nan=0.0, posinf=0.0, neginf=0.0)
        image = np.clip(image, 0.0, None)
        self._advance(RenderState.AVERAGED)

        self.elapsed = time.monotonic() - start
        elapsed_ms = max(int(self.elapsed * 1000), 1)
        logger.info("Rendered in %s", format_rough_duration(self.elapsed) or "under a second")
        logger.info("%d rays/millisecond", config.rays_to_trace // elapsed_ms)
        self._advance(RenderState.DONE)
        return image


def render(scene: Hittable, camera: Camera, config: RenderConfig,
           on_progress: Optional[ProgressCallback] = None) -> np.ndarray:
    """Renders scene through camera with config; see ParallelRenderer."""
    return ParallelRenderer(scene, camera, config, on_progress).render()
