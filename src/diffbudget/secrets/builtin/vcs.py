"""Git hosting, CI/CD and package registry tokens."""

from diffbudget.secrets.models import SecretPattern

ALL_VCS_PATTERNS = [
    SecretPattern(id="github_personal_access_token", pattern=r"\bghp_[0-9A-Za-z]{36}\b"),
    SecretPattern(id="github_fine_grained_pat", pattern=r"\bgithub_pat_[0-9A-Za-z_]{82}\b"),
    SecretPattern(id="github_oauth_token", pattern=r"\bgho_[0-9A-Za-z]{36}\b"),
    SecretPattern(id="github_server_token", pattern=r"\bghs_[0-9A-Za-z]{36}\b"),
    SecretPattern(id="github_user_token", pattern=r"\bghu_[0-9A-Za-z]{36}\b"),
    SecretPattern(id="gitlab_pat", pattern=r"\bglpat-[0-9A-Za-z_-]{20}\b"),
    SecretPattern(id="gitlab_runner_token", pattern=r"\bglrt-[0-9A-Za-z_-]{20}\b"),
]

ALL_CI_PATTERNS = [
    SecretPattern(id="circleci_token", pattern=r"\bcircle-[a-f0-9]{40}\b"),
    SecretPattern(id="mongodb_atlas_token", pattern=r"\batlasv1\.[A-Za-z0-9_-]{60}\b"),
    SecretPattern(id="pulumi_token", pattern=r"\bpul-[a-f0-9]{40}\b"),
    SecretPattern(id="npm_token", pattern=r"\bnpm_[A-Za-z0-9]{36}\b"),
    SecretPattern(id="pypi_token", pattern=r"\bpypi-[A-Za-z0-9]{100}\b"),
    SecretPattern(id="rubygems_token", pattern=r"\brubygems_[a-f0-9]{48}\b"),
    SecretPattern(id="docker_pat", pattern=r"\bdckr_pat_[A-Za-z0-9_-]{27}\b"),
]

ALL_HOSTING_PATTERNS = [
    SecretPattern(id="netlify_personal_token", pattern=r"\bnfp_[A-Za-z0-9]{40}\b"),
    SecretPattern(id="netlify_team_token", pattern=r"\bnft_[A-Za-z0-9]{40}\b"),
    SecretPattern(id="flyio_token", pattern=r"\bfo1_[A-Za-z0-9]{40}\b"),
    SecretPattern(id="render_token", pattern=r"\brnd_[A-Za-z0-9]{32}\b"),
]
