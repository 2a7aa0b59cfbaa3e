# raytracer/multithread/task_pool.py
# ---------------------------------------------------------------
# Простой пул задач на основе concurrent.futures.
# Живёт один раунд трассировки: задачи – чистые функции от
# неизменяемой сцены, результаты собираются в вызывающем потоке.
# ---------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor
import queue

class TaskPool:
    """Пул готового количества потоков; задачи принимаются как callables."""
    def __init__(self, max_workers=None):
        self.executor = ThreadPoolExecutor(max_workers=max_workers,
                                           thread_name_prefix="raytracer")
        self.tasks = queue.Queue()
        self._shutdown = False

    def submit(self, fn, *args, **kwargs):
        """Отправить задачу в пул, вернуть Future."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        future = self.executor.submit(fn, *args, **kwargs)
        self.tasks.put(future)
        return future

    def map(self, fn, items):
        """Одна задача на элемент; результаты в порядке `items`."""
        futures = [self.submit(fn, item) for item in items]
        self.wait_all()
        return [f.result() for f in futures]

    def wait_all(self):
        """Блокировать до завершения всех поставленных задач."""
        while not self.tasks.empty():
            future = self.tasks.get()
            future.result()  # пробрасывает исключения, если они возникли

    def shutdown(self, wait=True):
        self._shutdown = True
        self.executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown(wait=True)
