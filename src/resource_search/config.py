from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Origin used to resolve relative URLs, never copied into SearchOptions
    base_origin: str = "https://remix.guide"

    # Where /resources index requests are sent
    discover_pathname: str = "/discover"

    # ── Platforms ──
    # A tag matching one of these becomes `platform=`, anything else `integration=`
    platforms: list[str] = [
        "architect",
        "aws",
        "azure",
        "cloudflare",
        "deno",
        "firebase",
        "fly",
        "netlify",
        "render",
        "vercel",
    ]
    # Optional YAML override, ignored when the file is missing
    platforms_config_path: str = "config/platforms.yaml"

    log_level: str = "INFO"


settings = Settings()
