"""
Configuration module providing pipeline settings through PipelineConfig class.
"""


from .pipeline_config import PipelineConfig

# Export PipelineConfig as the public interface of this package
__all__ = ['PipelineConfig']
