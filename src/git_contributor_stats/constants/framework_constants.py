"""
Constants for detecting frameworks and build tools from file paths.
"""

# ============================================================================
# MARKER TOKENS - substrings matched anywhere in a path (CASE-SENSITIVE)
# A path can match several markers. Generic tokens such as "react" or "helm"
# are deliberately loose and will also match unrelated directory names.

FRAMEWORK_MARKERS: tuple[tuple[str, str], ...] = (
    # Build tools
    ("build.gradle", "Gradle"),
    ("pom.xml", "Maven"),
    ("build.sbt", "Scala (SBT)"),
    ("CMakeLists.txt", "CMake"),
    ("build.xml", "Ant"),
    ("Makefile", "Make"),
    ("Rakefile", "Rake"),
    # Package manifests
    ("package.json", "Node.js"),
    ("Gemfile", "Ruby on Rails"),
    ("composer.json", "PHP"),
    ("pubspec.yaml", "Dart"),
    ("mix.exs", "Elixir"),
    # JavaScript tooling and frameworks
    ("webpack.config.js", "Webpack"),
    ("angular.json", "Angular"),
    ("vue.config.js", "Vue.js"),
    ("next.config.js", "Next.js"),
    ("nuxt.config.js", "Nuxt.js"),
    ("gatsby-config.js", "Gatsby"),
    ("server.js", "Express.js"),
    ("app.js", "Express.js"),
    ("react", "React"),
    ("redux", "Redux"),
    ("vue", "Vue.js"),
    ("svelte", "Svelte"),
    ("ember", "Ember.js"),
    ("backbone", "Backbone.js"),
    ("jquery", "jQuery"),
    # CSS frameworks
    ("bootstrap", "Bootstrap"),
    ("tailwind", "Tailwind CSS"),
    ("foundation", "Foundation"),
    ("bulma", "Bulma"),
    # JVM frameworks
    ("spring-boot-starter", "Spring Boot"),
    ("application.yml", "Spring Framework"),
    ("application.properties", "Spring Framework"),
    # Ruby
    ("config.ru", "Rack"),
    # CI / infrastructure
    ("Jenkinsfile", "Jenkins"),
    ("Dockerfile", "Docker"),
    ("Vagrantfile", "Vagrant"),
    ("terraform", "Terraform"),
    ("ansible", "Ansible"),
    ("kubernetes", "Kubernetes"),
    ("helm", "Helm"),
)
