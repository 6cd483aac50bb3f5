"""Signal tables for stack detection.

Every table is an ordered tuple of (signal, label) pairs. Order matters:
the classifier scans each table front to back and the first satisfied
entry wins, so an earlier entry beats a later one when a project carries
both signals. Infra is the one table scanned exhaustively.

Signal forms:
  "name"    exact basename or relative path
  "*.ext"   any path ending in ".ext"
  "dir/"    any path under a top-level "dir" (infra only)
"""

# Manifest file -> (language, runtime).
MANIFEST_SIGNALS: tuple[tuple[str, tuple[str, str]], ...] = (
    ("package.json", ("javascript", "node")),
    ("pyproject.toml", ("python", "python")),
    ("setup.py", ("python", "python")),
    ("requirements.txt", ("python", "python")),
    ("go.mod", ("go", "go")),
    ("Cargo.toml", ("rust", "rust")),
    ("Gemfile", ("ruby", "ruby")),
    ("composer.json", ("php", "php")),
    ("pom.xml", ("java", "jvm")),
    ("build.gradle", ("java", "jvm")),
    ("build.gradle.kts", ("kotlin", "jvm")),
    ("*.csproj", ("csharp", "dotnet")),
    ("*.sln", ("csharp", "dotnet")),
)

# Presence of any of these next to a JavaScript manifest means TypeScript.
TYPESCRIPT_INDICATORS: tuple[str, ...] = ("tsconfig.json", "tsconfig.base.json")

FRAMEWORK_SIGNALS: tuple[tuple[str, str], ...] = (
    ("next.config.js", "next.js"),
    ("next.config.mjs", "next.js"),
    ("next.config.ts", "next.js"),
    ("nuxt.config.ts", "nuxt"),
    ("nuxt.config.js", "nuxt"),
    ("vite.config.js", "vite"),
    ("vite.config.ts", "vite"),
    ("vite.config.mts", "vite"),
    ("svelte.config.js", "sveltekit"),
    ("astro.config.mjs", "astro"),
    ("astro.config.ts", "astro"),
    ("remix.config.js", "remix"),
    ("angular.json", "angular"),
    ("vue.config.js", "vue-cli"),
    ("gatsby-config.js", "gatsby"),
    ("gatsby-config.ts", "gatsby"),
    ("manage.py", "django"),
    ("config/routes.rb", "rails"),
    ("artisan", "laravel"),
    ("symfony.lock", "symfony"),
    ("application.properties", "spring-boot"),
    ("application.yml", "spring-boot"),
)

# Lockfile basename -> package manager.
PACKAGE_MANAGER_SIGNALS: tuple[tuple[str, str], ...] = (
    ("package-lock.json", "npm"),
    ("yarn.lock", "yarn"),
    ("pnpm-lock.yaml", "pnpm"),
    ("bun.lockb", "bun"),
    ("bun.lock", "bun"),
    ("poetry.lock", "poetry"),
    ("Pipfile.lock", "pipenv"),
    ("uv.lock", "uv"),
    ("Gemfile.lock", "bundler"),
    ("composer.lock", "composer"),
    ("go.sum", "go-modules"),
    ("Cargo.lock", "cargo"),
)

# Runtime -> package manager assumed when no lockfile matched.
DEFAULT_PACKAGE_MANAGERS: tuple[tuple[str, str], ...] = (
    ("node", "npm"),
)

TEST_FRAMEWORK_SIGNALS: tuple[tuple[str, str], ...] = (
    ("jest.config.js", "jest"),
    ("jest.config.ts", "jest"),
    ("jest.config.mjs", "jest"),
    ("vitest.config.js", "vitest"),
    ("vitest.config.ts", "vitest"),
    ("vitest.config.mts", "vitest"),
    (".mocharc.yml", "mocha"),
    (".mocharc.json", "mocha"),
    ("cypress.config.js", "cypress"),
    ("cypress.config.ts", "cypress"),
    ("playwright.config.js", "playwright"),
    ("playwright.config.ts", "playwright"),
    ("pytest.ini", "pytest"),
    ("conftest.py", "pytest"),
    ("setup.cfg", "pytest"),  # usually carries [tool:pytest]
    (".rspec", "rspec"),
    ("phpunit.xml", "phpunit"),
    ("phpunit.xml.dist", "phpunit"),
)

# package.json dependency name -> test framework.
TEST_DEPENDENCY_SIGNALS: tuple[tuple[str, str], ...] = (
    ("jest", "jest"),
    ("vitest", "vitest"),
    ("mocha", "mocha"),
    ("ava", "ava"),
    ("tap", "tap"),
    ("cypress", "cypress"),
    ("playwright", "playwright"),
    ("@playwright/test", "playwright"),
    ("pytest", "pytest"),
    ("unittest", "unittest"),
    ("nose2", "nose2"),
)

# (pattern, provider). A pattern with "*" matches on the text before the
# first "*" as prefix and after the last "*" as suffix.
CI_PATTERNS: tuple[tuple[str, str], ...] = (
    (".github/workflows/*.yml", "github-actions"),
    (".github/workflows/*.yaml", "github-actions"),
    (".gitlab-ci.yml", "gitlab-ci"),
    ("Jenkinsfile", "jenkins"),
    (".circleci/config.yml", "circleci"),
    ("bitbucket-pipelines.yml", "bitbucket-pipelines"),
    (".travis.yml", "travis-ci"),
    ("azure-pipelines.yml", "azure-devops"),
)

LINTER_SIGNALS: tuple[tuple[str, str], ...] = (
    (".eslintrc", "eslint"),
    (".eslintrc.js", "eslint"),
    (".eslintrc.json", "eslint"),
    (".eslintrc.yml", "eslint"),
    ("eslint.config.js", "eslint"),
    ("eslint.config.mjs", "eslint"),
    ("eslint.config.ts", "eslint"),
    ("biome.json", "biome"),
    ("biome.jsonc", "biome"),
    (".pylintrc", "pylint"),
    ("ruff.toml", "ruff"),
    (".rubocop.yml", "rubocop"),
    (".golangci.yml", "golangci-lint"),
    (".golangci.yaml", "golangci-lint"),
    ("clippy.toml", "clippy"),
)

# A None label means the file needs a closer look (see manifests.py).
FORMATTER_SIGNALS: tuple[tuple[str, str | None], ...] = (
    (".prettierrc", "prettier"),
    (".prettierrc.js", "prettier"),
    (".prettierrc.json", "prettier"),
    (".prettierrc.yml", "prettier"),
    ("prettier.config.js", "prettier"),
    ("prettier.config.mjs", "prettier"),
    (".editorconfig", "editorconfig"),
    ("rustfmt.toml", "rustfmt"),
    (".style.yapf", "yapf"),
    ("pyproject.toml", None),
)

MONOREPO_SIGNALS: tuple[tuple[str, str], ...] = (
    ("turbo.json", "turborepo"),
    ("nx.json", "nx"),
    ("lerna.json", "lerna"),
    ("pnpm-workspace.yaml", "pnpm-workspaces"),
    ("rush.json", "rush"),
)

INFRA_SIGNALS: tuple[tuple[str, str], ...] = (
    ("Dockerfile", "docker"),
    ("docker-compose.yml", "docker-compose"),
    ("docker-compose.yaml", "docker-compose"),
    ("terraform/", "terraform"),
    ("*.tf", "terraform"),
    ("cdk.json", "aws-cdk"),
    ("serverless.yml", "serverless"),
    ("serverless.ts", "serverless"),
    ("fly.toml", "fly-io"),
    ("vercel.json", "vercel"),
    ("netlify.toml", "netlify"),
    ("render.yaml", "render"),
    ("railway.json", "railway"),
    ("Procfile", "heroku"),
)

# Exact infra indicators that mean the project runs in containers.
CONTAINER_INDICATOR = "Dockerfile"
COMPOSE_INDICATOR_PREFIX = "docker-compose"

FRAMEWORK_BUILD_TOOLS: tuple[tuple[str, str], ...] = (
    ("next.js", "next"),
    ("vite", "vite"),
    ("angular", "angular-cli"),
    ("gatsby", "gatsby"),
    ("astro", "astro"),
    ("sveltekit", "vite"),
)

RUNTIME_BUILD_TOOLS: tuple[tuple[str, str], ...] = (
    ("rust", "cargo"),
    ("go", "go"),
)


def lookup(table, key):
    """Return the label paired with key in an ordered table, or None."""
    for signal, label in table:
        if signal == key:
            return label
    return None
