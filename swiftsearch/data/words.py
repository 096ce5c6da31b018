# words.py - built-in dictionary of developer terms, used when no word file is configured

WORDS = (
    # languages
    "Python", "JavaScript", "TypeScript", "Java", "Kotlin", "Scala", "Go",
    "Rust", "C", "C++", "C#", "Ruby", "PHP", "Perl", "Swift", "Objective-C",
    "Dart", "Elixir", "Erlang", "Haskell", "OCaml", "Clojure", "Lua", "Julia",
    "R", "MATLAB", "Fortran", "COBOL", "Zig", "Nim", "Crystal", "F#", "Groovy",
    "Bash", "PowerShell", "SQL", "GraphQL", "WebAssembly", "Solidity", "Prolog",
    # web frameworks and libraries
    "React", "Redux", "Vue", "Nuxt", "Angular", "Svelte", "SvelteKit", "Next.js",
    "Remix", "Astro", "Gatsby", "jQuery", "Express", "Fastify", "NestJS",
    "Django", "Flask", "FastAPI", "Starlette", "Tornado", "Pyramid", "Rails",
    "Sinatra", "Laravel", "Symfony", "Spring", "Spring Boot", "Quarkus",
    "Micronaut", "Phoenix", "ASP.NET", "Blazor", "Gin", "Echo", "Fiber",
    "Actix", "Axum", "Rocket", "Tailwind CSS", "Bootstrap", "Sass", "Less",
    "Three.js", "D3.js", "Chart.js", "Framer Motion", "Vite", "Webpack",
    "Rollup", "Parcel", "esbuild", "Babel", "Node.js", "Deno", "Bun",
    # data and machine learning
    "NumPy", "pandas", "Polars", "SciPy", "scikit-learn", "TensorFlow",
    "PyTorch", "Keras", "JAX", "XGBoost", "LightGBM", "spaCy", "NLTK",
    "Hugging Face", "Transformers", "LangChain", "Matplotlib", "Seaborn",
    "Plotly", "Jupyter", "Apache Spark", "Apache Kafka", "Apache Flink",
    "Apache Airflow", "dbt", "Dask", "Ray",
    # databases and storage
    "PostgreSQL", "MySQL", "MariaDB", "SQLite", "MongoDB", "Redis",
    "Memcached", "Cassandra", "CouchDB", "DynamoDB", "Elasticsearch",
    "OpenSearch", "Neo4j", "InfluxDB", "ClickHouse", "Snowflake", "BigQuery",
    "Firebase", "Supabase", "Prisma", "SQLAlchemy", "Hibernate",
    # infrastructure and tooling
    "Docker", "Kubernetes", "Helm", "Terraform", "Ansible", "Puppet", "Chef",
    "Vagrant", "Nginx", "Apache HTTP Server", "Caddy", "Traefik", "Envoy",
    "Istio", "Prometheus", "Grafana", "Jaeger", "OpenTelemetry", "Sentry",
    "Jenkins", "GitHub Actions", "GitLab CI", "CircleCI", "Travis CI", "Git",
    "GitHub", "GitLab", "Bitbucket", "AWS", "Azure", "Google Cloud",
    "Cloudflare", "Vercel", "Netlify", "Heroku", "Linux", "Ubuntu", "Debian",
    "Fedora", "Arch Linux", "macOS", "Windows", "Vim", "Neovim", "Emacs",
    "Visual Studio Code", "IntelliJ IDEA", "PyCharm", "Xcode", "npm", "Yarn",
    "pnpm", "pip", "Poetry", "Conda", "Cargo", "Maven", "Gradle", "CMake",
    "Make", "Bazel", "pytest", "Jest", "Vitest", "Mocha", "Cypress",
    "Playwright", "Selenium", "ESLint", "Prettier", "Black", "Ruff", "mypy",
    # concepts
    "algorithm", "API", "REST", "gRPC", "WebSocket", "HTTP", "HTTPS", "TCP",
    "UDP", "DNS", "OAuth", "JWT", "JSON", "YAML", "TOML", "XML", "CSV",
    "microservices", "serverless", "container", "virtual machine", "cache",
    "caching", "concurrency", "parallelism", "asynchronous", "coroutine",
    "thread", "process", "mutex", "semaphore", "deadlock", "recursion",
    "memoization", "dynamic programming", "binary search", "hash table",
    "hash map", "heap", "stack", "queue", "linked list", "tree", "trie",
    "graph", "breadth-first search", "depth-first search", "sorting",
    "quicksort", "mergesort", "big O notation", "compiler", "interpreter",
    "garbage collection", "type system", "refactoring", "unit testing",
    "integration testing", "continuous integration", "continuous delivery",
    "DevOps", "observability", "load balancer", "reverse proxy",
    "message queue", "event sourcing", "CQRS", "domain-driven design",
    "design patterns", "dependency injection", "functional programming",
    "object-oriented programming", "machine learning", "deep learning",
    "neural network", "natural language processing", "computer vision",
    "reinforcement learning", "large language model", "embedding",
    "vector database", "autocomplete", "search engine", "indexing",
)
