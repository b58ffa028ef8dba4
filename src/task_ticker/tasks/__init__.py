"""
Task subsystem.

Components:
- task_models.py: Task value type and TaskFactory (random durations, default names)
- task_containers.py: FIFO queue / LIFO stack containers behind one protocol
- task_manager.py: owns one container and advances simulated time over it
- task_scheduler.py: async tick driver that feeds wall-clock time into a manager
"""
